import logging
import re
import typing

import pat2midi.midi_file
import pat2midi.options
import pat2midi.pattern


logger = logging.getLogger(__name__)

_EXTENSION = re.compile(r"\.[^/.]+$")


def strip_extension (filename: str) -> str:

	"""
	Remove the last extension from a file name (``"rock.pat"`` -> ``"rock"``).
	"""

	return _EXTENSION.sub("", filename)


def time_signature_for (pattern_length: int, note_duration: float) -> typing.Tuple[int, int, float]:

	"""
	Infer a time signature from the number of steps.

	A length that divides into 8 is read as sixteenth-note steps in quarter
	note beats, so 16 steps give 4/4 with the step length unchanged. Any other
	length is written over 8 with the step length doubled (the subdivision
	code halved), so 12 steps give 12/8.

	Returns:
		(numerator, denominator, note_duration) with the adjusted code.
	"""

	if pattern_length % 8 == 0:
		return pattern_length // 4, 4, note_duration

	return pattern_length, 8, note_duration / 2


def build_track (pattern: pat2midi.pattern.ParsedPattern, track_name: str, options: typing.Optional[pat2midi.options.MidiOptions] = None) -> pat2midi.midi_file.Track:

	"""
	Turn a parsed pattern into a track of note events.

	Every step holding an ``x`` or ``f`` on any line becomes one chord event
	carrying all the notes sounding at that step. Silent steps add to the wait
	before the next event. Each ``f`` also adds a short grace note one flam
	length before its step, unless ``options.no_flams`` is set.

	``options`` are expected to have passed ``validate_options()``.

	Parameters:
		pattern: The parsed pattern.
		track_name: Source file name; its extension is stripped for the track name.
		options: Conversion settings, defaults if omitted.
	"""

	if options is None:
		options = pat2midi.options.MidiOptions()

	track = pat2midi.midi_file.Track()
	track.add_track_name(strip_extension(track_name))
	track.set_tempo(options.bpm)

	numerator, denominator, note_duration = time_signature_for(pattern.pattern_length, options.note_duration)
	track.set_time_signature(numerator, denominator)

	ticks_per_note = pat2midi.midi_file.tick_duration(note_duration)
	ticks_per_flam = pat2midi.midi_file.tick_duration(options.flam_duration)

	wait = 0

	for step in range(pattern.pattern_length):

		notes_at_step: typing.List[typing.Tuple[bool, int]] = []

		for hit in pattern.hits:
			symbol = hit.pattern[step].lower()
			if symbol in (pat2midi.pattern.HIT_SYMBOL, pat2midi.pattern.FLAM_SYMBOL):
				notes_at_step.append((symbol == pat2midi.pattern.FLAM_SYMBOL, hit.note))

		if not notes_at_step:
			wait += ticks_per_note
			continue

		accented = pattern.is_accented(step)

		if not options.no_flams:

			for is_flam, pitch in notes_at_step:

				if not is_flam:
					continue

				tick = step * ticks_per_note - ticks_per_flam

				# The first step has no room before it, so its grace note lands after the hit.
				if tick < 0:
					tick = ticks_per_flam

				track.add_event(pat2midi.midi_file.NoteEvent(
					pitches = [pitch],
					duration = ticks_per_flam - 1,
					velocity = options.accent_velocity if accented else options.flam_velocity,
					tick = tick
				))

		track.add_event(pat2midi.midi_file.NoteEvent(
			pitches = [pitch for _, pitch in notes_at_step],
			duration = ticks_per_note,
			velocity = options.accent_velocity if accented else options.normal_velocity,
			wait = wait
		))

		wait = 0

	logger.debug(f"{track_name}: {pattern.pattern_length} steps, {len(track.events)} events, {numerator}/{denominator}")

	return track


def convert_pattern_to_midi (pattern: pat2midi.pattern.ParsedPattern, track_name: str, options: typing.Optional[pat2midi.options.MidiOptions] = None) -> bytes:

	"""
	Convert a parsed pattern into Standard MIDI File bytes.
	"""

	return pat2midi.midi_file.build_file([build_track(pattern, track_name, options)])
