import logging
from PIL import Image, ImageDraw, ImageFont
from dwen_config import CAPTION_POS, INITIAL_WINDOW_SIZE, MIN_WINDOW_SIZE, REFRESH_MS, WINDOW_TITLE

logger = logging.getLogger(__name__)


def compose_frame(pixels, caption=None, caption_pos=CAPTION_POS, scale=1.0):
    """Turn a canvas buffer into the Pillow image shown in the window."""
    img = Image.fromarray(pixels)
    if caption:
        draw = ImageDraw.Draw(img)
        draw.text(caption_pos, caption, fill=(0, 0, 0), font=ImageFont.load_default())
    if scale != 1.0:
        size = (max(1, int(img.width * scale)), max(1, int(img.height * scale)))
        img = img.resize(size, Image.Resampling.NEAREST)
    return img


class DrawingWindow:
    """Shows the session canvas while it is being drawn.

    ``root.after`` is the repaint trigger. Every tick presents the newest frame
    if the canvas changed; once the session completes one last frame is shown
    with the caption and no further ticks are scheduled.
    """

    def __init__(self, session, title=WINDOW_TITLE, min_size=MIN_WINDOW_SIZE,
                 initial_size=INITIAL_WINDOW_SIZE, refresh_ms=REFRESH_MS, scale=1.0):
        # Lazy import so headless runs never need Tk
        import tkinter as tk

        self.session = session
        self.refresh_ms = refresh_ms
        self.scale = scale
        self._generation = None
        self._photo = None
        self.finished = False

        self.root = tk.Tk()
        self.root.title(title)
        self.root.minsize(*min_size)
        self.root.geometry("{}x{}".format(*initial_size))
        self.root.protocol("WM_DELETE_WINDOW", self.close)

        self.label = tk.Label(self.root, borderwidth=0)
        self.label.pack(fill=tk.BOTH, expand=True)

    def _present(self, pixels, caption=None):
        from PIL import ImageTk

        img = compose_frame(pixels, caption=caption, scale=self.scale)
        # keep a reference or tk drops the image
        self._photo = ImageTk.PhotoImage(img)
        self.label.configure(image=self._photo)

    def _tick(self):
        if self.session.is_complete:
            _, pixels = self.session.canvas.frame()
            self._present(pixels, caption=self.session.caption)
            self.finished = True
            logger.info("Drawing complete, final frame shown")
            return

        latest = self.session.latest_frame(since=self._generation)
        if latest is not None:
            self._generation, pixels = latest
            self._present(pixels)
        self.root.after(self.refresh_ms, self._tick)

    def close(self):
        logger.info("Window closed")
        self.root.destroy()

    def run(self):
        self._tick()
        self.root.mainloop()
