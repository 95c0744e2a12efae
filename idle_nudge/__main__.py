import logging
import sys

from .config import parse_args
from .listener import GlobalStopKey, StopKeyHandler
from .pointer import ScreenPointer
from .watcher import IdleWatcher
from .window import StopWindow


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )


def main(argv=None):
    settings, args = parse_args(argv)
    setup_logging(args.verbose)

    watcher = IdleWatcher(
        ScreenPointer(),
        idle_threshold=settings.idle_threshold,
        poll_interval=settings.poll_interval,
        nudge_delay=settings.nudge_delay,
    )
    window = StopWindow(StopKeyHandler(watcher.stop, settings.stop_key), watcher)
    hotkey = None
    if settings.global_key:
        hotkey = GlobalStopKey(StopKeyHandler(watcher.stop, settings.global_key))

    print("Idle nudge running")
    print(f"Nudging after {settings.idle_threshold:g}s without mouse movement")
    print(f"{settings.stop_key} (in the window): Exit")
    if hotkey:
        print(f"{settings.global_key} (anywhere): Exit")

    watcher.start()
    if hotkey:
        hotkey.start()
    try:
        window.run()
    except KeyboardInterrupt:
        print("\nInterrupted")
    finally:
        watcher.stop()
        watcher.join()
        if hotkey:
            hotkey.stop()

    if watcher.failed:
        print("Stopped after an error.")
        return 1
    print(f"Exiting... ({watcher.nudges} nudges)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
