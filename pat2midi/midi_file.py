"""Single-track MIDI writer built on mido.

Note events are collected on a ``Track`` either sequentially (each event
waits a number of ticks after the previous sequential event has finished) or
at an explicit absolute tick. ``build_file()`` merges both kinds into one
delta-timed ``mido`` track and returns the Standard MIDI File bytes.
"""

import dataclasses
import io
import logging
import typing

import mido

import pat2midi.constants.durations
import pat2midi.constants.velocity


logger = logging.getLogger(__name__)

TICKS_PER_BEAT = pat2midi.constants.durations.TICKS_PER_BEAT

# Text meta events (track names) are written as UTF-8.
CHARSET = "utf-8"

# Sort order for messages sharing a tick.
_META_ORDER = 0
_NOTE_OFF_ORDER = 1
_NOTE_ON_ORDER = 2


def tick_duration (code: float) -> int:

	"""
	Convert a subdivision code (4 = quarter, 16 = sixteenth, ...) to ticks.
	"""

	return int(TICKS_PER_BEAT * 4 / code + 0.5)


def convert_velocity (velocity: float) -> int:

	"""
	Scale a 0-100 velocity to the MIDI range, rounding half up.
	"""

	velocity = min(velocity, pat2midi.constants.velocity.MAX_VELOCITY)

	return int(velocity / pat2midi.constants.velocity.MAX_VELOCITY * pat2midi.constants.velocity.MIDI_MAX_VELOCITY + 0.5)


@dataclasses.dataclass
class NoteEvent:

	"""
	One or more simultaneous notes.

	``wait`` applies to sequential events only. When ``tick`` is set the event
	is placed at that absolute position and ``wait`` is ignored.
	"""

	pitches: typing.List[int]
	duration: int
	velocity: int
	wait: int = 0
	tick: typing.Optional[int] = None
	channel: int = 0


class Track:

	"""
	Collects meta events and note events for a single MIDI track.
	"""

	def __init__ (self) -> None:

		self.meta: typing.List[mido.MetaMessage] = []
		self.events: typing.List[NoteEvent] = []


	def add_track_name (self, name: str) -> None:

		self.meta.append(mido.MetaMessage('track_name', name=name))


	def set_tempo (self, bpm: float) -> None:

		self.meta.append(mido.MetaMessage('set_tempo', tempo=mido.bpm2tempo(bpm)))


	def set_time_signature (self, numerator: int, denominator: int) -> None:

		self.meta.append(mido.MetaMessage(
			'time_signature',
			numerator = numerator,
			denominator = denominator,
			clocks_per_click = 24,
			notated_32nd_notes_per_beat = 8
		))


	def add_event (self, event: NoteEvent) -> None:

		self.events.append(event)


	def _timeline (self) -> typing.List[typing.Tuple[int, int, int, typing.Union[mido.Message, mido.MetaMessage]]]:

		"""
		Place every message at its absolute tick.

		Returns (tick, order, sequence, message) tuples ready for sorting.
		"""

		timeline: typing.List[typing.Tuple[int, int, int, typing.Union[mido.Message, mido.MetaMessage]]] = []
		sequence = 0

		for message in self.meta:
			timeline.append((0, _META_ORDER, sequence, message))
			sequence += 1

		cursor = 0

		for event in self.events:

			if event.tick is None:
				start = cursor + event.wait
				cursor = start + event.duration

			else:
				start = event.tick

			end = start + event.duration
			velocity = convert_velocity(event.velocity)

			for pitch in event.pitches:
				timeline.append((start, _NOTE_ON_ORDER, sequence, mido.Message('note_on', channel=event.channel, note=pitch, velocity=velocity)))
				sequence += 1

			for pitch in event.pitches:
				timeline.append((end, _NOTE_OFF_ORDER, sequence, mido.Message('note_off', channel=event.channel, note=pitch, velocity=velocity)))
				sequence += 1

		return timeline


	def messages (self) -> typing.List[typing.Union[mido.Message, mido.MetaMessage]]:

		"""
		Return the track as delta-timed messages, ending with ``end_of_track``.
		"""

		timeline = sorted(self._timeline(), key=lambda entry: entry[:3])

		messages: typing.List[typing.Union[mido.Message, mido.MetaMessage]] = []
		last_tick = 0

		for tick, _, _, message in timeline:
			messages.append(message.copy(time=tick - last_tick))
			last_tick = tick

		messages.append(mido.MetaMessage('end_of_track', time=0))

		return messages


def build_file (tracks: typing.List[Track]) -> bytes:

	"""
	Serialize tracks into Standard MIDI File bytes.

	A single track is written as format 0, several tracks as format 1.
	"""

	mid = mido.MidiFile(type=0 if len(tracks) == 1 else 1, ticks_per_beat=TICKS_PER_BEAT, charset=CHARSET)

	for track in tracks:
		mid.tracks.append(mido.MidiTrack(track.messages()))

	buffer = io.BytesIO()
	mid.save(file=buffer)

	logger.debug(f"Built MIDI file: {len(tracks)} track(s), {buffer.tell()} bytes")

	return buffer.getvalue()


def midi_to_json (data: bytes) -> typing.Dict[str, typing.Any]:

	"""
	Decode MIDI file bytes into a JSON-serializable dictionary.

	Used by the ``--debug`` output mode to show exactly what was written.
	"""

	mid = mido.MidiFile(file=io.BytesIO(data), charset=CHARSET)

	tracks: typing.List[typing.List[typing.Dict[str, typing.Any]]] = []

	for midi_track in mid.tracks:

		rendered: typing.List[typing.Dict[str, typing.Any]] = []

		for message in midi_track:
			fields = message.dict()
			entry = {"deltaTime": fields.pop("time")}
			entry.update(fields)
			rendered.append(entry)

		tracks.append(rendered)

	return {
		"header": {
			"format": mid.type,
			"numTracks": len(mid.tracks),
			"ticksPerBeat": mid.ticks_per_beat,
		},
		"tracks": tracks,
	}
