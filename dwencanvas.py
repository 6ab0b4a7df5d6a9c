import logging
import threading
from math import isfinite
import cv2
import numpy as np
from PIL import Image, ImageColor

logger = logging.getLogger(__name__)


class InvalidDimensionError(ValueError):
    """Raised when a canvas is built with a non-positive width or height."""


class CanvasSaveError(OSError):
    """Raised when the canvas cannot be written to disk."""


def to_rgb(color):
    """Return an (r, g, b) tuple for a Pillow color string or an RGB(A) sequence."""
    if isinstance(color, str):
        color = ImageColor.getrgb(color)
    r, g, b = (int(c) for c in tuple(color)[:3])
    return (r, g, b)


def clip_segment(x0, y0, x1, y1, xmin, ymin, xmax, ymax):
    """Liang-Barsky clip of a segment to a rectangle.

    Returns the clipped endpoints, or None when no part of the segment lies
    inside. Non-finite coordinates count as outside.
    """
    if not all(isfinite(v) for v in (x0, y0, x1, y1)):
        return None
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - xmin), (dx, xmax - x0), (-dy, y0 - ymin), (dy, ymax - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return (x0 + t0 * dx, y0 + t0 * dy, x0 + t1 * dx, y0 + t1 * dy)


class Canvas:
    """RGB pixel grid that accumulates turtle strokes.

    Pixels live in ``pixels[y, x]`` with y growing downward. Every write goes
    through a lock and bumps ``generation`` so another thread can copy
    consistent frames while drawing is in progress.
    """

    def __init__(self, width: int, height: int, background="white"):
        if not isinstance(width, (int, np.integer)) or not isinstance(height, (int, np.integer)):
            raise InvalidDimensionError(f"Canvas size must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise InvalidDimensionError(f"Canvas size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.background = to_rgb(background)
        self.pixels = np.full((self.height, self.width, 3), self.background, dtype=np.uint8)
        self.generation = 0
        self._lock = threading.Lock()

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x, y, color):
        x, y = int(round(x)), int(round(y))
        if not self.in_bounds(x, y):
            return
        with self._lock:
            self.pixels[y, x] = to_rgb(color)
            self.generation += 1

    def get_pixel(self, x: int, y: int):
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} canvas")
        return tuple(int(c) for c in self.pixels[y, x])

    def _limit(self, size):
        # OpenCV rejects thickness above 32767; this bound already covers the buffer
        return min(size, 2 * (self.width + self.height))

    def draw_line(self, x0, y0, x1, y1, color, width=1):
        """Rasterize a segment between two real-valued points.

        The segment is first clipped in floating point to the buffer grown by
        half the stroke width, so far off-canvas endpoints never reach OpenCV's
        integer point parser. Clipped endpoints snap to the nearest pixel.
        LINE_8 keeps the output free of anti-aliasing.
        """
        thickness = self._limit(max(1, int(width)))
        pad = thickness / 2.0 + 1
        clipped = clip_segment(x0, y0, x1, y1, -pad, -pad,
                               self.width - 1 + pad, self.height - 1 + pad)
        if clipped is None:
            return
        x0, y0, x1, y1 = clipped
        p0 = (int(round(x0)), int(round(y0)))
        p1 = (int(round(x1)), int(round(y1)))
        with self._lock:
            cv2.line(self.pixels, p0, p1, to_rgb(color), thickness, lineType=cv2.LINE_8)
            self.generation += 1

    def dot(self, x, y, diameter, color):
        if not (isfinite(x) and isfinite(y) and isfinite(diameter)):
            return
        radius = self._limit(max(0, int(round(diameter / 2.0))))
        if not (-radius - 1 <= x <= self.width + radius and -radius - 1 <= y <= self.height + radius):
            return
        center = (int(round(x)), int(round(y)))
        with self._lock:
            cv2.circle(self.pixels, center, radius, to_rgb(color), -1, lineType=cv2.LINE_8)
            self.generation += 1

    def clear(self):
        with self._lock:
            self.pixels[:, :] = self.background
            self.generation += 1

    def snapshot(self):
        """Read-only view of the live buffer. Not a copy."""
        view = self.pixels.view()
        view.flags.writeable = False
        return view

    def frame(self):
        """Return ``(generation, pixels_copy)`` taken atomically."""
        with self._lock:
            return self.generation, self.pixels.copy()

    def to_image(self):
        with self._lock:
            return Image.fromarray(self.pixels.copy())

    def save_image(self, path):
        img = self.to_image()
        try:
            img.save(path, format="PNG")
        except OSError as e:
            raise CanvasSaveError(f"Could not save canvas to {path}: {e}") from e
        logger.info("Saved %dx%d canvas to %s", self.width, self.height, path)


def load_image(path):
    """Read an image file back as an RGB ``uint8`` array shaped (height, width, 3)."""
    with Image.open(path) as img:
        return np.asarray(img.convert("RGB"), dtype=np.uint8).copy()
