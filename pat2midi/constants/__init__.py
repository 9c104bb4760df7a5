"""Constants for pat2midi.

- ``pat2midi.constants.drums`` - Drum names accepted in ``.pat`` files and their MIDI notes
- ``pat2midi.constants.durations`` - Subdivision codes and MIDI file resolution
- ``pat2midi.constants.velocity`` - Default and boundary velocities (0-100 scale)
"""
