import json
import logging
import os
import pathlib
import typing

import pat2midi.midi_file
import pat2midi.options
import pat2midi.pattern
import pat2midi.synthesizer


logger = logging.getLogger(__name__)

PATTERN_SUFFIX = ".pat"
MIDI_SUFFIX = ".mid"
DEFAULT_OUTPUT_DIRNAME = "midi"


class ConversionError(Exception):
	pass


def output_path_for (input_path: typing.Union[str, os.PathLike], output_dir: typing.Optional[typing.Union[str, os.PathLike]] = None) -> pathlib.Path:

	"""
	Return the ``.mid`` path for a pattern file, beside it or inside ``output_dir``.
	"""

	path = pathlib.Path(input_path)
	name = path.with_suffix(MIDI_SUFFIX).name

	if output_dir is None:
		return path.with_name(name)

	return pathlib.Path(output_dir) / name


def convert_file (
	input_path: typing.Union[str, os.PathLike],
	output_path: typing.Optional[typing.Union[str, os.PathLike]] = None,
	debug: bool = False,
	options: typing.Optional[pat2midi.options.MidiOptions] = None
) -> bytes:

	"""
	Convert one ``.pat`` file.

	The MIDI data is written to ``output_path`` (by default the input path
	with a ``.mid`` suffix). With ``debug`` nothing is written; the file is
	decoded again and printed as JSON instead.

	Returns:
		The MIDI file bytes.

	Raises:
		ConversionError: If the file cannot be read, converted or written.
	"""

	input_path = pathlib.Path(input_path)
	output_path = pathlib.Path(output_path) if output_path is not None else output_path_for(input_path)

	try:
		content = input_path.read_text(encoding="utf-8")
		parsed = pat2midi.pattern.parse(content, input_path.name)
		data = pat2midi.synthesizer.convert_pattern_to_midi(parsed, input_path.name, options)

		if debug:
			print(json.dumps(pat2midi.midi_file.midi_to_json(data), indent=2))
			return data

		output_path.write_bytes(data)

	except (OSError, ValueError) as exc:
		raise ConversionError(f"Failed to process file {input_path}: {exc}") from exc

	logger.info(f"Converted {input_path.name} to {output_path.resolve()}")

	return data


def convert_directory (
	input_dir: typing.Union[str, os.PathLike],
	output_dir: typing.Optional[typing.Union[str, os.PathLike]] = None,
	debug: bool = False,
	options: typing.Optional[pat2midi.options.MidiOptions] = None
) -> typing.List[pathlib.Path]:

	"""
	Convert every ``.pat`` file directly inside ``input_dir``.

	Files are converted one at a time in name order into ``output_dir``
	(default ``<input_dir>/midi``, created if needed). The first failure stops
	the batch; files already written are kept.

	Returns:
		The input paths that were converted.

	Raises:
		ConversionError: If a file fails, or the output directory cannot be created.
	"""

	input_dir = pathlib.Path(input_dir)
	output_dir = pathlib.Path(output_dir) if output_dir is not None else input_dir / DEFAULT_OUTPUT_DIRNAME

	try:
		output_dir.mkdir(parents=True, exist_ok=True)
		entries = sorted(input_dir.iterdir())
	except OSError as exc:
		raise ConversionError(f"Failed to process directory {input_dir}: {exc}") from exc

	converted: typing.List[pathlib.Path] = []

	for entry in entries:

		if not entry.is_file() or not entry.name.endswith(PATTERN_SUFFIX):
			continue

		convert_file(entry, output_path_for(entry, output_dir), debug=debug, options=options)
		converted.append(entry)

	if not converted:
		logger.warning(f"No {PATTERN_SUFFIX} files found in {input_dir}")

	return converted
