from .errors import PointerError


class ScreenPointer:
    """Real mouse pointer, driven through pyautogui."""

    def __init__(self, gui=None):
        if gui is None:
            # pyautogui connects to the display when imported
            import pyautogui as gui
        self.gui = gui

    def position(self):
        x, y = self.gui.position()
        return int(x), int(y)

    def move_to(self, x, y):
        # pyautogui aborts with FailSafeException while the pointer sits in a
        # screen corner; that is the user pulling the emergency brake.
        # _pause=False: the watcher does its own waiting between moves.
        try:
            self.gui.moveTo(x, y, _pause=False)
        except self.gui.FailSafeException as e:
            raise PointerError(str(e)) from e
