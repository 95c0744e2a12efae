import logging

from .config import STOP_KEY, normalize_key

logger = logging.getLogger(__name__)


class StopKeyHandler:
    """Calls on_stop once when the stop key is pressed, ignores everything else.

    Keys arrive by name (a Tk keysym or a pynput Key name), so the same
    handler serves the window and the global hook.
    """

    def __init__(self, on_stop, stop_key=STOP_KEY):
        self.on_stop = on_stop
        self.stop_key = normalize_key(stop_key)
        self.triggered = False

    def on_press(self, key_name):
        """Returns True if key_name is the stop key."""
        if not key_name or normalize_key(key_name) != self.stop_key:
            return False
        if not self.triggered:
            self.triggered = True
            logger.debug("Stop key %s pressed", self.stop_key)
            self.on_stop()
        return True


class GlobalStopKey:
    """Stop key that works from any window, through a pynput keyboard hook."""

    def __init__(self, handler):
        self.handler = handler
        self._listener = None

    def on_press(self, key):
        # Special keys are pynput Key members and carry a name; KeyCodes don't
        if self.handler.on_press(getattr(key, "name", None)):
            # Returning False ends the pynput listener thread
            return False
        return None

    def start(self):
        from pynput import keyboard

        self._listener = keyboard.Listener(on_press=self.on_press)
        self._listener.start()

    def stop(self):
        if self._listener:
            self._listener.stop()

    def join(self, timeout=None):
        if self._listener:
            self._listener.join(timeout)
