"""Drum names understood by the pattern parser.

Each instrument line in a ``.pat`` file starts with one of these two-letter
names (matched case-insensitively) or with a raw MIDI note number. The notes
follow the General MIDI Level 1 percussion map, so the output plays back on
any GM drum kit::

    BD x---x---x---x---
    SD ----x-------x---
    CH x-x-x-x-x-x-x-x-

Note that ``LT``, ``MT`` and ``HT`` use the GM high floor tom, low-mid tom
and high tom respectively.
"""

import types
import typing


# ─── Individual note constants ───────────────────────────────────────

BASS_DRUM = 36
RIM_SHOT = 37
SNARE_DRUM = 38
CLAP = 39
CLOSED_HAT = 42
LOW_TOM = 43
OPEN_HAT = 46
MID_TOM = 47
CYMBAL = 49
HIGH_TOM = 50
COWBELL = 56


# ─── Name map ────────────────────────────────────────────────────────

DRUM_NAME_MAP: typing.Mapping[str, int] = types.MappingProxyType({
	"BD": BASS_DRUM,
	"RS": RIM_SHOT,
	"SD": SNARE_DRUM,
	"CP": CLAP,
	"CH": CLOSED_HAT,
	"LT": LOW_TOM,
	"OH": OPEN_HAT,
	"MT": MID_TOM,
	"CY": CYMBAL,
	"HT": HIGH_TOM,
	"CB": COWBELL,
})

# The key that marks the accent line rather than an instrument.
ACCENT_KEY = "AC"
