import dataclasses
import logging
import os
import typing

import yaml

import pat2midi.constants.durations
import pat2midi.constants.velocity


logger = logging.getLogger(__name__)


class OptionsError(ValueError):
	pass


@dataclasses.dataclass(frozen=True)
class MidiOptions:

	"""
	Settings for converting a pattern to MIDI.

	Durations are subdivision codes (16 = sixteenth note), velocities use a
	0-100 scale. Build a variant with ``with_overrides()`` and check it with
	``validate_options()`` before conversion; the converter itself trusts
	whatever it is given.
	"""

	bpm: float = pat2midi.constants.durations.DEFAULT_BPM
	note_duration: int = pat2midi.constants.durations.DEFAULT_NOTE_DURATION
	accent_velocity: int = pat2midi.constants.velocity.DEFAULT_ACCENT_VELOCITY
	normal_velocity: int = pat2midi.constants.velocity.DEFAULT_NORMAL_VELOCITY
	flam_duration: int = pat2midi.constants.durations.DEFAULT_FLAM_DURATION
	flam_velocity: int = pat2midi.constants.velocity.DEFAULT_FLAM_VELOCITY
	no_flams: bool = False


	def with_overrides (self, **overrides: typing.Any) -> "MidiOptions":

		"""
		Return a copy with the given fields replaced. ``None`` values are skipped.

		Raises:
			OptionsError: If a name is not an option.
		"""

		names = {field.name for field in dataclasses.fields(self)}
		unknown = sorted(set(overrides) - names)

		if unknown:
			raise OptionsError(f"Unknown option(s): {', '.join(unknown)}")

		return dataclasses.replace(self, **{name: value for name, value in overrides.items() if value is not None})


def _is_number (value: typing.Any) -> bool:

	return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_range (name: str, value: typing.Any, low: float, high: float) -> None:

	if not _is_number(value) or not low <= value <= high:
		raise OptionsError(f"{name} must be between {low} and {high}, got {value!r}")


def _check_choice (name: str, value: typing.Any, choices: typing.Sequence[int]) -> None:

	if not _is_number(value) or value not in choices:
		raise OptionsError(f"{name} must be one of {', '.join(str(choice) for choice in choices)}, got {value!r}")


def validate_options (options: MidiOptions) -> None:

	"""
	Check every option against its documented bounds.

	The flam duration must be a shorter note than the requested note
	duration, i.e. a strictly larger subdivision code.

	Raises:
		OptionsError: On the first invalid value.
	"""

	_check_range("bpm", options.bpm, pat2midi.constants.durations.MIN_BPM, pat2midi.constants.durations.MAX_BPM)
	_check_choice("note_duration", options.note_duration, pat2midi.constants.durations.NOTE_DURATIONS)

	for name in ("accent_velocity", "normal_velocity", "flam_velocity"):
		_check_range(name, getattr(options, name), pat2midi.constants.velocity.MIN_VELOCITY, pat2midi.constants.velocity.MAX_VELOCITY)

	_check_choice("flam_duration", options.flam_duration, pat2midi.constants.durations.FLAM_DURATIONS)

	if options.flam_duration <= options.note_duration:
		raise OptionsError(f"flam_duration ({options.flam_duration}) must be greater than note_duration ({options.note_duration})")

	if not isinstance(options.no_flams, bool):
		raise OptionsError(f"no_flams must be true or false, got {options.no_flams!r}")


def load_options_file (config_path: str) -> typing.Dict[str, typing.Any]:

	"""
	Load option overrides from a YAML file.

	The file holds a mapping of option names to values, for example::

		bpm: 96
		accent_velocity: 110
		no_flams: true

	An empty file gives no overrides.

	Raises:
		OptionsError: If the file is missing, unreadable, not a mapping or
			names an unknown option.
	"""

	if not os.path.exists(config_path):
		raise OptionsError(f"Config file {config_path} not found")

	try:
		with open(config_path, 'r') as f:
			data = yaml.safe_load(f)
	except (OSError, yaml.YAMLError) as exc:
		raise OptionsError(f"Failed to read config file {config_path}: {exc}") from exc

	if data is None:
		logger.info(f"Config file {config_path} is empty - using defaults")
		return {}

	if not isinstance(data, dict):
		raise OptionsError(f"Config file {config_path} must contain a mapping of option names to values")

	names = {field.name for field in dataclasses.fields(MidiOptions)}
	unknown = sorted(str(key) for key in data if key not in names)

	if unknown:
		raise OptionsError(f"Unknown option(s) in {config_path}: {', '.join(unknown)}")

	return data
