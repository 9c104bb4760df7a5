"""Subdivision codes and MIDI file resolution.

Note lengths are expressed as **subdivision codes** rather than ticks: the
code is the denominator of the note value, so 4 is a quarter note, 16 a
sixteenth and 64 a sixty-fourth. ``pat2midi.midi_file.tick_duration()``
turns a code into ticks at ``TICKS_PER_BEAT`` resolution.
"""

# Ticks per quarter note written into the MIDI file header.
TICKS_PER_BEAT = 128

WHOLE = 1
HALF = 2
QUARTER = 4
EIGHTH = 8
SIXTEENTH = 16
THIRTYSECOND = 32
SIXTYFOURTH = 64
HUNDREDTWENTYEIGHTH = 128
TWOHUNDREDFIFTYSIXTH = 256

# Codes accepted for the length of each step.
NOTE_DURATIONS = (WHOLE, HALF, QUARTER, EIGHTH, SIXTEENTH, THIRTYSECOND, SIXTYFOURTH)

# Codes accepted for the flam pre-roll.
FLAM_DURATIONS = (SIXTYFOURTH, HUNDREDTWENTYEIGHTH, TWOHUNDREDFIFTYSIXTH)

DEFAULT_NOTE_DURATION = SIXTEENTH
DEFAULT_FLAM_DURATION = SIXTYFOURTH

# Tempo bounds in beats per minute.
DEFAULT_BPM = 120
MIN_BPM = 30
MAX_BPM = 240
