from math import cos, sin, radians, pi
from dwencanvas import to_rgb

ARC_STEPS = 30


def normalize_heading(angle):
    """Fold an angle in degrees into [0, 360)."""
    angle = float(angle) % 360.0
    # -1e-17 % 360.0 == 360.0
    if angle >= 360.0:
        angle = 0.0
    return angle


class Turtle:
    """A turtle bound to a Canvas that rasterizes every pen-down move.

    Coordinates are canvas pixels (y grows downward). Heading 0 points along
    +x and increases clockwise on screen, so ``forward`` is simply
    ``x += d*cos(h)``, ``y += d*sin(h)``.
    """

    def __init__(self, canvas, x=0.0, y=0.0, heading=0.0, delay=None, arc_steps=ARC_STEPS):
        self.canvas = canvas
        self.x = float(x)
        self.y = float(y)
        self.heading = normalize_heading(heading)
        self.pen_down = True
        self.pen_size = 1
        self.pen_color = (0, 0, 0)
        self.delay = delay
        self.arc_steps = max(1, int(arc_steps))

    def penup(self):
        self.pen_down = False

    def pendown(self):
        self.pen_down = True

    def pensize(self, size):
        self.pen_size = max(1, int(size))

    def color(self, color):
        self.pen_color = to_rgb(color)

    def setheading(self, angle):
        self.heading = normalize_heading(angle)

    def position(self):
        return (self.x, self.y)

    def setposition(self, x, y):
        """Jump to (x, y) without drawing, whatever the pen state."""
        self.x = float(x)
        self.y = float(y)

    def goto(self, x, y):
        if self.pen_down:
            self.canvas.draw_line(self.x, self.y, x, y, self.pen_color, self.pen_size)
        self.x = float(x)
        self.y = float(y)

    def forward(self, distance):
        """Advance along the heading, rasterizing the segment onto the canvas when the pen is down."""
        new_x = self.x + distance * cos(radians(self.heading))
        new_y = self.y + distance * sin(radians(self.heading))
        if self.pen_down:
            self.canvas.draw_line(self.x, self.y, new_x, new_y, self.pen_color, self.pen_size)
        self.x = new_x
        self.y = new_y

    def back(self, distance):
        self.forward(-distance)

    def turn(self, angle):
        """Rotate clockwise (on screen) by angle degrees; negative turns the other way."""
        self.heading = normalize_heading(self.heading + angle)

    def right(self, angle):
        self.turn(angle)

    def left(self, angle):
        self.turn(-angle)

    def dot(self, size=None, color=None):
        """Stamp a filled disk on the canvas at the turtle, without moving it."""
        if size is None:
            size = max(self.pen_size + 4, 2 * self.pen_size)
        color = self.pen_color if color is None else to_rgb(color)
        self.canvas.dot(self.x, self.y, size, color)

    def circle(self, radius, extent=360, steps=None):
        """Trace a circular arc as a run of straight chords.

        The extent sign picks the turning direction (positive turns the same
        way as increasing heading). A radius whose sign differs from the
        extent's walks the chords backward. The heading always ends exactly
        ``extent`` degrees from where it started.
        """
        if extent == 0:
            return
        if radius == 0:
            self.turn(extent)
            return

        steps = self.arc_steps if steps is None else max(1, int(steps))
        chord = 2 * pi * radius * extent / (360.0 * steps)
        angle_step = extent / steps

        for _ in range(steps):
            self.forward(chord)
            self.turn(angle_step)
            self._pause()

    def _pause(self):
        if self.delay is not None:
            self.delay()
