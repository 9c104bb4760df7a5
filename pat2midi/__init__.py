"""
pat2midi - convert text drum patterns to MIDI files.

A ``.pat`` file describes a drum loop one instrument per line, one character
per step::

    BD x---x---x---x---
    SD ----x-------f---
    CH --x---x---x--xx-
    AC ----x-------x-x-

- **Instruments.** Each line starts with a drum name (``BD``, ``RS``, ``SD``,
  ``CP``, ``CH``, ``LT``, ``OH``, ``MT``, ``CY``, ``HT``, ``CB``) or a MIDI
  note number.
- **Steps.** ``x`` is a hit, ``f`` is a flam (a quiet grace note just before
  the hit) and anything else is a rest. Case does not matter.
- **Accents.** The ``AC`` line marks accented steps with ``x``; every hit on
  an accented step plays at the accent velocity.
- **Length.** The shortest line sets the pattern length; longer lines are
  cut to fit.
- **Time signature.** Lengths divisible by 8 are written as sixteenth notes
  in quarter-note bars (16 steps = 4/4). Anything else is written in eighths
  (12 steps = 12/8).

Usage from Python::

    import pat2midi

    parsed = pat2midi.parse(open("rock.pat").read(), "rock.pat")
    data = pat2midi.convert_pattern_to_midi(parsed, "rock.pat", pat2midi.MidiOptions(bpm=96))

Or from the command line::

    pat2midi rock.pat --bpm 96
    pat2midi patterns/ -o midi/ --no-flams

Package-level exports: ``parse``, ``convert_pattern_to_midi``, ``build_track``,
``MidiOptions``, ``validate_options``, ``convert_file``, ``convert_directory``.
"""

import pat2midi.convert
import pat2midi.options
import pat2midi.pattern
import pat2midi.synthesizer


parse = pat2midi.pattern.parse
ParsedPattern = pat2midi.pattern.ParsedPattern
DrumHit = pat2midi.pattern.DrumHit
PatternLineError = pat2midi.pattern.PatternLineError

MidiOptions = pat2midi.options.MidiOptions
OptionsError = pat2midi.options.OptionsError
validate_options = pat2midi.options.validate_options

build_track = pat2midi.synthesizer.build_track
convert_pattern_to_midi = pat2midi.synthesizer.convert_pattern_to_midi

convert_file = pat2midi.convert.convert_file
convert_directory = pat2midi.convert.convert_directory
ConversionError = pat2midi.convert.ConversionError
