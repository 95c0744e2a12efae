import tkinter as tk

from .config import WINDOW_SIZE


class StopWindow:
    """Small window that holds keyboard focus for the stop key.

    Pressing the stop key while the window is focused stops the watcher; the
    window closes itself once the watcher thread has finished. Closing the
    window stops the watcher too.
    """

    def __init__(self, handler, watcher, title="Idle nudge", size=WINDOW_SIZE, check_ms=200):
        self.handler = handler
        self.watcher = watcher
        self.check_ms = check_ms
        self.closed = False
        self._after_id = None

        self.root = tk.Tk()
        self.root.title(title)
        self.root.geometry(size)
        self.root.resizable(False, False)

        tk.Label(self.root, text=f"Keeping the session awake\n\n{handler.stop_key}: Exit").pack(expand=True)

        self.root.bind("<KeyPress>", self.on_key)
        self.root.protocol("WM_DELETE_WINDOW", self.close)

    def on_key(self, event):
        self.handler.on_press(event.keysym)

    def check_watcher(self):
        if self.closed:
            return
        if not self.watcher.is_alive():
            self.close()
            return
        self._after_id = self.root.after(self.check_ms, self.check_watcher)

    def close(self):
        if self.closed:
            return
        self.closed = True
        self.watcher.stop()
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
        self.root.destroy()

    def run(self):
        self._after_id = self.root.after(self.check_ms, self.check_watcher)
        self.root.focus_force()
        self.root.mainloop()
