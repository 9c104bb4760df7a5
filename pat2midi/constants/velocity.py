"""Velocity constants.

Velocities in pat2midi use a 0-100 scale. The MIDI writer scales them to the
MIDI range (0-127) when the file is serialized.
"""

DEFAULT_ACCENT_VELOCITY = 100
DEFAULT_NORMAL_VELOCITY = 80
DEFAULT_FLAM_VELOCITY = 60

MIN_VELOCITY = 0
MAX_VELOCITY = 100

# MIDI standard range
MIDI_MAX_VELOCITY = 127
