import threading


class DrawingSession:
    """State shared by the drawing thread and the window.

    The canvas guards its own buffer; completion is a one-way Event set by the
    drawing thread and polled by the presenter.
    """

    def __init__(self, canvas, caption="BEIJING 2022"):
        self.canvas = canvas
        self.caption = caption
        self.error = None
        self._complete = threading.Event()

    @property
    def is_complete(self):
        return self._complete.is_set()

    def complete(self):
        self._complete.set()

    def fail(self, exc):
        self.error = exc
        self._complete.set()

    def wait(self, timeout=None):
        return self._complete.wait(timeout)

    def latest_frame(self, since=None):
        """Return ``(generation, pixels)`` if the canvas changed after ``since``, else None."""
        if since is not None and self.canvas.generation == since:
            return None
        return self.canvas.frame()
