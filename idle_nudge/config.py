import argparse
import math

# ---------------- Defaults ----------------
POLL_INTERVAL = 1.0       # seconds between pointer checks
IDLE_THRESHOLD = 300.0    # seconds without movement before a nudge (5 min)
NUDGE_DELAY = 0.1         # how long the displaced pointer stays put
NUDGE_OFFSET = (1, 1)
STOP_KEY = "Escape"
WINDOW_SIZE = "200x200"

# Keys that may stop the program. Names follow Tk keysyms lowercased, which
# are also pynput's Key member names apart from the aliases below.
STOP_KEYS = {"escape", "pause", "scroll_lock", "insert", "home", "end"} | {
    f"f{n}" for n in range(1, 13)
}
KEY_ALIASES = {"esc": "escape"}


def normalize_key(name):
    name = name.lower()
    return KEY_ALIASES.get(name, name)


def _check_seconds(label, value, allow_zero=True):
    if not math.isfinite(value):
        raise ValueError(f"{label} must be a finite number, got {value}")
    if value < 0 or (value == 0 and not allow_zero):
        bound = ">= 0" if allow_zero else "> 0"
        raise ValueError(f"{label} must be {bound}, got {value}")


def _check_key(label, name):
    if not name or normalize_key(name) not in STOP_KEYS:
        choices = ", ".join(sorted(STOP_KEYS))
        raise ValueError(f"{label} must be one of {choices}; got {name!r}")


class Settings:
    def __init__(self, idle_threshold=IDLE_THRESHOLD, poll_interval=POLL_INTERVAL,
                 nudge_delay=NUDGE_DELAY, stop_key=STOP_KEY, global_key=None):
        _check_seconds("idle threshold", idle_threshold)
        _check_seconds("poll interval", poll_interval, allow_zero=False)
        _check_seconds("nudge delay", nudge_delay)
        _check_key("stop key", stop_key)
        if global_key is not None:
            _check_key("global key", global_key)

        self.idle_threshold = float(idle_threshold)
        self.poll_interval = float(poll_interval)
        self.nudge_delay = float(nudge_delay)
        self.stop_key = stop_key
        self.global_key = global_key

    def __repr__(self):
        return (f"Settings(idle_threshold={self.idle_threshold}, "
                f"poll_interval={self.poll_interval}, "
                f"nudge_delay={self.nudge_delay}, stop_key={self.stop_key!r}, "
                f"global_key={self.global_key!r})")


# ---------------- Command line ----------------
def build_parser():
    parser = argparse.ArgumentParser(
        prog="idle-nudge",
        description="Nudge the mouse by one pixel after a stretch of inactivity "
                    "so the session is not marked idle or away.",
    )
    parser.add_argument(
        "--idle-threshold",
        type=float,
        default=IDLE_THRESHOLD,
        metavar="SECONDS",
        help="Seconds without pointer movement before a nudge (default: %(default)s).",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=POLL_INTERVAL,
        metavar="SECONDS",
        help="Seconds between pointer checks (default: %(default)s).",
    )
    parser.add_argument(
        "--nudge-delay",
        type=float,
        default=NUDGE_DELAY,
        metavar="SECONDS",
        help="How long the nudged pointer is held before moving back (default: %(default)s).",
    )
    parser.add_argument(
        "--stop-key",
        default=STOP_KEY,
        metavar="NAME",
        help="Key that stops the program while its window has focus (default: %(default)s).",
    )
    parser.add_argument(
        "--global-key",
        default=None,
        metavar="NAME",
        help="Also stop on this key pressed in any window, e.g. f8. Off by default.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    return parser


def parse_args(argv=None):
    """Returns (Settings, argparse.Namespace); bad values exit via parser.error."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings(
            idle_threshold=args.idle_threshold,
            poll_interval=args.poll_interval,
            nudge_delay=args.nudge_delay,
            stop_key=args.stop_key,
            global_key=args.global_key,
        )
    except ValueError as e:
        parser.error(str(e))
    return settings, args
