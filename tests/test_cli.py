import json
import pathlib

import pytest

import pat2midi.__main__
import pat2midi.options


ROCK = "BD x---x---x---x---\nSD ----f-------x---\nAC ----x-------x---\n"


def _args (*argv: str):

	return pat2midi.__main__.build_parser().parse_args(list(argv))


# ---------------------------------------------------------------------------
# Option resolution
# ---------------------------------------------------------------------------

def test_resolve_options_defaults () -> None:

	"""With no flags the defaults are used."""

	options = pat2midi.__main__.resolve_options(_args("rock.pat"))

	assert options == pat2midi.options.MidiOptions()


def test_resolve_options_flags () -> None:

	"""Every MIDI flag maps onto its option."""

	options = pat2midi.__main__.resolve_options(_args(
		"rock.pat",
		"--bpm", "96",
		"--note-duration", "8",
		"--accent-velocity", "90",
		"--normal-velocity", "70",
		"--flam-duration", "128",
		"--flam-velocity", "40",
		"--no-flams",
	))

	assert options.bpm == 96
	assert options.note_duration == 8
	assert options.accent_velocity == 90
	assert options.normal_velocity == 70
	assert options.flam_duration == 128
	assert options.flam_velocity == 40
	assert options.no_flams is True


def test_flags_override_config_file (tmp_path: pathlib.Path) -> None:

	"""Config file values apply unless a flag says otherwise."""

	config = tmp_path / "options.yaml"
	config.write_text("bpm: 90\nnote_duration: 8\nno_flams: true\n")

	options = pat2midi.__main__.resolve_options(_args("rock.pat", "--config", str(config), "--bpm", "100"))

	assert options.bpm == 100
	assert options.note_duration == 8
	assert options.no_flams is True


def test_flams_flag_overrides_config_file (tmp_path: pathlib.Path) -> None:

	"""--flams turns flams back on when the config file disables them."""

	config = tmp_path / "options.yaml"
	config.write_text("no_flams: true\n")

	assert pat2midi.__main__.resolve_options(_args("rock.pat", "--config", str(config))).no_flams is True
	assert pat2midi.__main__.resolve_options(_args("rock.pat", "--config", str(config), "--flams")).no_flams is False


def test_resolve_options_validates () -> None:

	"""Invalid combinations are rejected before anything is converted."""

	with pytest.raises(pat2midi.options.OptionsError):
		pat2midi.__main__.resolve_options(_args("rock.pat", "--note-duration", "64", "--flam-duration", "64"))


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

def test_main_converts_file (write_pattern) -> None:

	"""A file target is written beside itself."""

	path = write_pattern("rock.pat", ROCK)

	assert pat2midi.__main__.main([str(path)]) == 0
	assert path.with_suffix(".mid").exists()


def test_main_output_flag (write_pattern, tmp_path: pathlib.Path) -> None:

	"""-o names the output file."""

	path = write_pattern("rock.pat", ROCK)
	output = tmp_path / "beat.mid"

	assert pat2midi.__main__.main([str(path), "-o", str(output)]) == 0
	assert output.exists()


def test_main_converts_directory (write_pattern, tmp_path: pathlib.Path) -> None:

	"""A directory target converts into <dir>/midi."""

	write_pattern("rock.pat", ROCK)
	write_pattern("funk.pat", ROCK)

	assert pat2midi.__main__.main([str(tmp_path), "--quiet"]) == 0
	assert sorted(path.name for path in (tmp_path / "midi").iterdir()) == ["funk.mid", "rock.mid"]


def test_main_debug (write_pattern, capsys: pytest.CaptureFixture) -> None:

	"""--debug prints JSON to stdout and writes no file."""

	path = write_pattern("rock.pat", ROCK)

	assert pat2midi.__main__.main([str(path), "--debug", "--bpm", "100"]) == 0

	rendered = json.loads(capsys.readouterr().out)
	assert rendered["header"]["format"] == 0
	assert not path.with_suffix(".mid").exists()


def test_main_invalid_option_touches_nothing (write_pattern) -> None:

	"""An options error exits with status 1 before any file is converted."""

	path = write_pattern("rock.pat", ROCK)

	assert pat2midi.__main__.main([str(path), "--bpm", "300"]) == 1
	assert not path.with_suffix(".mid").exists()


def test_main_missing_config (write_pattern, tmp_path: pathlib.Path) -> None:

	"""A missing config file is an options error."""

	path = write_pattern("rock.pat", ROCK)

	assert pat2midi.__main__.main([str(path), "--config", str(tmp_path / "nope.yaml")]) == 1


def test_main_missing_target (tmp_path: pathlib.Path) -> None:

	"""A missing input file exits with status 1."""

	assert pat2midi.__main__.main([str(tmp_path / "missing.pat")]) == 1


def test_main_requires_target () -> None:

	"""Running without a target is a usage error."""

	with pytest.raises(SystemExit) as info:
		pat2midi.__main__.main([])

	assert info.value.code == 2


def test_main_bad_line_still_succeeds (write_pattern) -> None:

	"""Line warnings do not change the exit status."""

	path = write_pattern("odd.pat", "BD x---\nQQ x---\n")

	assert pat2midi.__main__.main([str(path)]) == 0
	assert path.with_suffix(".mid").exists()
