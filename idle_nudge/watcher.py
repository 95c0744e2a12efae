import logging
import threading
import time

from .config import IDLE_THRESHOLD, NUDGE_DELAY, NUDGE_OFFSET, POLL_INTERVAL
from .errors import PointerError

logger = logging.getLogger(__name__)


class IdleWatcher:
    """Polls the pointer and nudges it once it has been still for too long.

    The watcher owns all of its state: the last seen position and the time
    of the last detected activity are written only by the polling thread,
    and the stop flag is a threading.Event so a stop request made from the
    keyboard listener's thread is seen on the next iteration.

    ``clock`` must be monotonic. When ``sleep`` is None the waits between
    polls block on the stop flag, so a stop request ends them early.
    """

    def __init__(self, pointer, idle_threshold=IDLE_THRESHOLD, poll_interval=POLL_INTERVAL,
                 nudge_delay=NUDGE_DELAY, clock=time.monotonic, sleep=None):
        self.pointer = pointer
        self.idle_threshold = idle_threshold
        self.poll_interval = poll_interval
        self.nudge_delay = nudge_delay
        self.clock = clock
        self.sleep = sleep

        self.last_pos = None
        self.last_move_time = None
        self.nudges = 0
        self.failed = False

        self._stop_event = threading.Event()
        self._thread = None

    # ---------------- State ----------------
    @property
    def running(self):
        return not self._stop_event.is_set()

    def stop(self):
        self._stop_event.set()

    def elapsed(self):
        """Seconds since the pointer last moved (by hand or by a nudge)."""
        if self.last_move_time is None:
            return 0.0
        return self.clock() - self.last_move_time

    def _pause(self, seconds):
        if self.sleep is not None:
            self.sleep(seconds)
        else:
            self._stop_event.wait(seconds)

    def reset(self):
        self.last_pos = self.pointer.position()
        self.last_move_time = self.clock()

    # ---------------- Polling ----------------
    def poll(self):
        """Run one check. Returns True if the pointer was nudged."""
        current = self.pointer.position()

        if current != self.last_pos:
            # User moved the mouse, restart the countdown
            self.last_pos = current
            self.last_move_time = self.clock()
            return False

        if self.elapsed() >= self.idle_threshold:
            self.nudge(*current)
            return True
        return False

    def nudge(self, x, y):
        """Shift the pointer by one step and put it back where it was."""
        dx, dy = NUDGE_OFFSET
        idle_for = self.elapsed()

        self.pointer.move_to(x + dx, y + dy)
        self._pause(self.nudge_delay)
        self.pointer.move_to(x, y)

        self.last_move_time = self.clock()
        self.nudges += 1
        logger.info("Nudged pointer at (%d, %d) after %.0fs idle", x, y, idle_for)

    def run(self):
        # Stays set unless the loop ends on a stop request, so an unexpected
        # exception escaping the thread still counts as a failure
        self.failed = True
        try:
            if self.last_pos is None:
                self.reset()
            logger.debug("Watching pointer from %s, threshold %.1fs", self.last_pos, self.idle_threshold)

            while self.running:
                self.poll()
                self._pause(self.poll_interval)
            self.failed = False
        except InterruptedError:
            # CPython retries interrupted waits itself (PEP 475); this comes
            # from sleep functions that raise it explicitly
            logger.exception("Pointer watch interrupted")
        except PointerError as e:
            logger.error("Pointer control failed, stopping: %s", e)
        finally:
            self._stop_event.set()

    # ---------------- Thread ----------------
    def start(self):
        if self._thread and self._thread.is_alive():
            return
        self._thread = threading.Thread(target=self.run, name="idle-watcher", daemon=True)
        self._thread.start()

    def join(self, timeout=None):
        if self._thread:
            self._thread.join(timeout)

    def is_alive(self):
        return self._thread is not None and self._thread.is_alive()
