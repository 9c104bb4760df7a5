import dataclasses
import logging
import math
import re
import typing

import pat2midi.constants.drums


logger = logging.getLogger(__name__)

HIT_SYMBOL = "x"
FLAM_SYMBOL = "f"

_DECIMAL = re.compile(r"[+-]?[0-9]+")


class PatternLineError(ValueError):
	pass


@dataclasses.dataclass
class DrumHit:

	"""
	One instrument line: a MIDI note and its step symbols.
	"""

	note: int
	pattern: str


@dataclasses.dataclass
class ParsedPattern:

	"""
	A ``.pat`` file after parsing, with every line cut to ``pattern_length`` steps.
	"""

	hits: typing.List[DrumHit] = dataclasses.field(default_factory=list)
	accents: typing.List[bool] = dataclasses.field(default_factory=list)
	pattern_length: int = 0


	def is_accented (self, step: int) -> bool:

		"""
		Steps past the end of the accent line are never accented.
		"""

		return step < len(self.accents) and self.accents[step]


def resolve_note (key: str) -> int:

	"""
	Turn an instrument key into a MIDI note number.

	Drum names (``BD``, ``SD``, ...) are looked up case-insensitively, anything
	else must be a decimal integer. The number is not range checked.

	Raises:
		PatternLineError: If the key is neither a drum name nor a number.
	"""

	name = key.upper()

	if name in pat2midi.constants.drums.DRUM_NAME_MAP:
		return pat2midi.constants.drums.DRUM_NAME_MAP[name]

	if not _DECIMAL.fullmatch(key):
		raise PatternLineError(f"Unknown drum name or note number {key!r}")

	return int(key)


def parse_accents (steps: str) -> typing.List[bool]:

	"""
	Parse an accent line: ``x`` or ``X`` marks an accented step.
	"""

	return [char.lower() == HIT_SYMBOL for char in steps]


def parse (content: str, source_name: str = "<pattern>") -> ParsedPattern:

	"""
	Parse the text of a ``.pat`` file.

	Each non-blank line holds a key and a step string separated by whitespace::

		BD x---x---x---x---
		SD ----x-------x---
		AC ----x-------x-x-

	The key is a drum name, a MIDI note number, or ``AC`` for the accent line
	(a later ``AC`` line replaces an earlier one). Lines with fewer than two
	tokens are skipped silently. Lines whose key cannot be resolved are
	logged as warnings and skipped, and parsing carries on.

	The shortest accepted step string sets ``pattern_length``, and every
	line is truncated to it. With no accepted lines the length is 0.

	Parameters:
		content: The file text.
		source_name: Name used in warnings, usually the file name.

	Returns:
		A ``ParsedPattern``.
	"""

	hits: typing.List[DrumHit] = []
	accents: typing.List[bool] = []
	pattern_length: float = math.inf

	for line_number, line in enumerate(content.splitlines(), start=1):

		tokens = line.split()

		if len(tokens) < 2:
			continue

		key, steps = tokens[0], tokens[1]

		if key.upper() == pat2midi.constants.drums.ACCENT_KEY:
			accents = parse_accents(steps)

		else:
			try:
				note = resolve_note(key)
			except PatternLineError as exc:
				logger.warning(f"{source_name}:{line_number}: {exc} - line skipped")
				continue

			hits.append(DrumHit(note=note, pattern=steps))

		pattern_length = min(pattern_length, len(steps))

	length = 0 if math.isinf(pattern_length) else int(pattern_length)

	for hit in hits:
		hit.pattern = hit.pattern[:length]

	return ParsedPattern(
		hits = hits,
		accents = accents[:length],
		pattern_length = length
	)


def format_pattern (pattern: ParsedPattern) -> str:

	"""
	Render a parsed pattern back to ``.pat`` text, using note numbers as keys.

	For patterns of at least one step, parsing the result gives back an equal
	``ParsedPattern``.
	"""

	lines = [f"{hit.note} {hit.pattern}" for hit in pattern.hits]

	if pattern.accents:
		lines.append(pat2midi.constants.drums.ACCENT_KEY + " " + "".join("x" if accent else "-" for accent in pattern.accents))

	return "\n".join(lines) + "\n" if lines else ""
