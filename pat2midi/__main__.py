import argparse
import logging
import os
import sys
import typing

import pat2midi.constants.durations
import pat2midi.convert
import pat2midi.options


logger = logging.getLogger(__name__)


def build_parser () -> argparse.ArgumentParser:

	"""
	Create the command line parser.
	"""

	parser = argparse.ArgumentParser(
		prog = "pat2midi",
		description = "Convert .pat drum pattern files to MIDI files."
	)

	parser.add_argument("target", help="a .pat file, or a directory of .pat files")
	parser.add_argument("-o", "--output", help="output file, or output directory when converting a directory (default: <directory>/midi)")
	parser.add_argument("--debug", action="store_true", help="print the MIDI data as JSON instead of writing files")
	parser.add_argument("--config", help="YAML file of option values")
	parser.add_argument("-q", "--quiet", action="store_true", help="only log warnings and errors")

	midi = parser.add_argument_group("MIDI options")
	midi.add_argument("--bpm", type=float, help=f"tempo, {pat2midi.constants.durations.MIN_BPM}-{pat2midi.constants.durations.MAX_BPM} (default: {pat2midi.constants.durations.DEFAULT_BPM})")
	midi.add_argument("--note-duration", type=int, help="step length as a subdivision code: 1, 2, 4, 8, 16, 32 or 64 (default: 16)")
	midi.add_argument("--accent-velocity", type=int, help="velocity of accented steps, 0-100")
	midi.add_argument("--normal-velocity", type=int, help="velocity of other steps, 0-100")
	midi.add_argument("--flam-duration", type=int, help="flam grace note length: 64, 128 or 256, shorter than the note duration (default: 64)")
	midi.add_argument("--flam-velocity", type=int, help="velocity of flam grace notes on unaccented steps, 0-100")
	midi.add_argument("--flams", action=argparse.BooleanOptionalAction, default=None, help="render flams as grace notes (default), or with --no-flams play them as ordinary hits")

	return parser


def resolve_options (args: argparse.Namespace) -> pat2midi.options.MidiOptions:

	"""
	Combine defaults, the config file and command line flags, then validate.

	Raises:
		pat2midi.options.OptionsError: If any value is invalid.
	"""

	options = pat2midi.options.MidiOptions()

	if args.config:
		options = options.with_overrides(**pat2midi.options.load_options_file(args.config))

	options = options.with_overrides(
		bpm = args.bpm,
		note_duration = args.note_duration,
		accent_velocity = args.accent_velocity,
		normal_velocity = args.normal_velocity,
		flam_duration = args.flam_duration,
		flam_velocity = args.flam_velocity,
		no_flams = None if args.flams is None else not args.flams
	)

	pat2midi.options.validate_options(options)

	return options


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Command line entry point. Returns the process exit status.
	"""

	args = build_parser().parse_args(argv)

	logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO, format="%(levelname)s: %(message)s")

	try:
		options = resolve_options(args)

		if os.path.isdir(args.target):
			pat2midi.convert.convert_directory(args.target, args.output, debug=args.debug, options=options)

		else:
			pat2midi.convert.convert_file(args.target, args.output, debug=args.debug, options=options)

	except (pat2midi.options.OptionsError, pat2midi.convert.ConversionError) as exc:
		logger.error(f"Error: {exc}")
		return 1

	return 0


if __name__ == "__main__":
	sys.exit(main())
