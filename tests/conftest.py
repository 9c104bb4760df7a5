import io
import pathlib
import typing

import mido
import pytest


def _note_ons (data: bytes) -> typing.List[typing.Tuple[int, int, int]]:

	"""Return (absolute tick, note, velocity) for every note_on in a MIDI file."""

	mid = mido.MidiFile(file=io.BytesIO(data))
	tick = 0
	result: typing.List[typing.Tuple[int, int, int]] = []

	for message in mid.tracks[0]:
		tick += message.time
		if message.type == 'note_on':
			result.append((tick, message.note, message.velocity))

	return result


def _meta (data: bytes, message_type: str) -> mido.MetaMessage:

	"""Return the first meta message of a given type in a MIDI file."""

	mid = mido.MidiFile(file=io.BytesIO(data))

	for message in mid.tracks[0]:
		if message.type == message_type:
			return message

	raise AssertionError(f"No {message_type} message in file")


@pytest.fixture
def note_ons () -> typing.Callable[[bytes], typing.List[typing.Tuple[int, int, int]]]:

	"""Decode the note_on messages of MIDI file bytes."""

	return _note_ons


@pytest.fixture
def meta () -> typing.Callable[[bytes, str], mido.MetaMessage]:

	"""Find a meta message in MIDI file bytes."""

	return _meta


@pytest.fixture
def write_pattern (tmp_path: pathlib.Path) -> typing.Callable[[str, str], pathlib.Path]:

	"""Write a .pat file into the test's temporary directory."""

	def _write (name: str, content: str) -> pathlib.Path:
		path = tmp_path / name
		path.write_text(content)
		return path

	return _write
