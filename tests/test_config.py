import pytest

from idle_nudge.config import IDLE_THRESHOLD, POLL_INTERVAL, Settings, normalize_key, parse_args


def test_defaults():
    settings, args = parse_args([])
    assert settings.idle_threshold == IDLE_THRESHOLD == 300.0
    assert settings.poll_interval == POLL_INTERVAL == 1.0
    assert settings.nudge_delay == 0.1
    assert settings.stop_key == "Escape"
    assert settings.global_key is None
    assert not args.verbose


def test_overrides():
    settings, args = parse_args(["--idle-threshold", "3", "--poll-interval", "0.5",
                                 "--stop-key", "F8", "--global-key", "pause", "-v"])
    assert settings.idle_threshold == 3.0
    assert settings.poll_interval == 0.5
    assert settings.stop_key == "F8"
    assert settings.global_key == "pause"
    assert args.verbose


def test_normalize_key():
    assert normalize_key("Escape") == "escape"
    assert normalize_key("esc") == "escape"
    assert normalize_key("Scroll_Lock") == "scroll_lock"


@pytest.mark.parametrize("kwargs", [
    {"idle_threshold": -1},
    {"idle_threshold": float("nan")},
    {"idle_threshold": float("inf")},
    {"poll_interval": 0},
    {"poll_interval": float("inf")},
    {"poll_interval": float("nan")},
    {"nudge_delay": -0.1},
    {"nudge_delay": float("inf")},
    {"stop_key": ""},
    {"stop_key": "a"},
    {"global_key": "not-a-key"},
])
def test_settings_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        Settings(**kwargs)


@pytest.mark.parametrize("argv, message", [
    (["--poll-interval", "0"], "poll interval"),
    (["--idle-threshold", "nan"], "finite"),
    (["--poll-interval", "inf"], "finite"),
    (["--stop-key", "space"], "stop key"),
])
def test_bad_value_is_usage_error(capsys, argv, message):
    with pytest.raises(SystemExit) as exc:
        parse_args(argv)
    assert exc.value.code == 2
    assert message in capsys.readouterr().err
