"""
Bing Dwen Dwen, the Beijing 2022 panda mascot, as a list of turtle strokes.

Each stroke is a pen-up jump to ``start`` followed by a path. Path items are
either a number (absolute heading) or a ``(radius, extent)`` pair handed to
``Turtle.circle``. Coordinates and headings are written in a 600x800 design
frame with y pointing up and headings counter-clockwise; ``draw_stroke`` flips
both onto the canvas. ``color``/``width`` of None keep the current pen.
"""

import logging

logger = logging.getLogger(__name__)

DESIGN_HEIGHT = 800

SOFT_BLACK = (10, 10, 10)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
CYAN = (0, 255, 255)
GREEN = (0, 255, 0)
YELLOW = (255, 255, 0)
DARK_ORANGE = (255, 140, 0)


def stroke(name, start, path, color=None, width=None):
    return {"name": name, "start": start, "color": color, "width": width, "path": path}


BODY = [
    stroke("outline", (200, 700), [
        20, (250, 35),                                   # top of head
        50, (42, 180),                                   # left ear
        -50, (190, 30), (320, 45),                       # left side
        (-120, -30), (-200, -12), (18, 85), (180, 23),   # left leg
        (20, 110), (-15, -115), (-100, -12),
        (-15, -120), (15, 110), (150, 30), (15, 70),     # right leg
        (150, 10), (-200, -35), (150, 20),
        -120, (-50, -30), (35, 200), (300, 23),          # right arm
        86, (300, 26),                                   # right side
        122, (50, 160),                                  # right ear
    ], color=SOFT_BLACK, width=3),
    stroke("left arm", (450, 600), [80, (45, 200), (300, 21)], color=SOFT_BLACK, width=3),
    stroke("right ear inner", (140, 650), [120, (28, 160), 210, (-150, -21)], width=2),
    stroke("left ear inner", (360, 700), [218, (-30, 150), 136, (-150, -23)]),
    stroke("left arm inner", (455, 583), [95, (37, 160), (20, 50), (200, 28)]),
    stroke("right arm inner", (100, 425), [-120, (-53, -30), (27, 200), (300, 20), -77, (300, 14)]),
    stroke("right leg inner", (240, 260), [
        -155, (-15, -100), (10, 110), (100, 30), (15, 65), (100, 10), (-200, -15),
        -14, (200, 27),
    ]),
    stroke("left leg inner", (390, 300), [
        -115, (-110, -15), (-200, -10), (18, 80), (180, 13), (20, 90), (-15, -60),
        42, (200, 30),
    ]),
]

EYES = [
    stroke("right eye patch", (210, 620), [40, (35, 152), (100, 50), (35, 130), (100, 50)],
           color=BLACK, width=3),
    stroke("right eye", (220, 610), [0, (25, 360)]),
    stroke("right eye", (222, 603), [0, (19, 360)]),
    stroke("right eye", (222, 597), [0, (10, 360)]),
    stroke("right eye", (220, 580), [0, (5, 360)]),
    stroke("left eye patch", (300, 585), [120, (32, 152), (100, 55), (25, 120), (120, 45)]),
    stroke("left eye", (335, 610), [0, (25, 360)]),
    stroke("left eye", (333, 603), [0, (19, 360)]),
    stroke("left eye", (333, 597), [0, (10, 360)]),
    stroke("left eye", (335, 580), [0, (5, 360)]),
]

NOSE = [
    stroke("nose", (290, 550), [40, (8, 130), (22, 180), (8, 130), 0, (-100, -10)],
           color=BLACK, width=3),
]

MOUTH = [
    stroke("mouth", (245, 510), [-36, (-60, -70), -132, (44, 100)], color=BLACK, width=2),
]

HEART = [
    stroke("heart", (490, 600), [36, (8, 180), (60, 24), 110, (60, 24), (8, 180)],
           color=RED, width=3),
]

# the rings keep whatever heading the heart left behind
RINGS = [
    stroke("blue ring", (275, 320), [(10, 360)], color=BLUE, width=1),
    stroke("black ring", (287, 320), [(10, 360)], color=BLACK, width=1),
    stroke("red ring", (299, 320), [(10, 360)], color=RED, width=1),
    stroke("yellow ring", (281, 310), [(10, 360)], color=YELLOW, width=1),
    stroke("green ring", (294, 310), [(10, 360)], color=GREEN, width=1),
]

RAINBOW = [
    stroke("rainbow cyan", (135, 600), [60, (165, 150), (130, 78), (250, 30), (136, 105)],
           color=CYAN, width=5),
    stroke("rainbow blue", (139, 596), [60, (160, 144), (120, 78), (242, 30), (132, 105)],
           color=BLUE, width=5),
    stroke("rainbow orange", (143, 592), [60, (155, 136), (116, 86), (220, 30), (131, 103)],
           color=DARK_ORANGE, width=5),
    stroke("rainbow yellow", (147, 588), [60, (150, 136), (104, 86), (220, 30), (125, 102)],
           color=YELLOW, width=5),
    stroke("rainbow green", (151, 584), [60, (145, 136), (90, 83), (220, 30), (119, 103)],
           color=GREEN, width=5),
]

SECTIONS = {
    "body": BODY,
    "eyes": EYES,
    "nose": NOSE,
    "mouth": MOUTH,
    "heart": HEART,
    "rings": RINGS,
    "rainbow": RAINBOW,
}


def draw_stroke(t, s, height=DESIGN_HEIGHT):
    x, y = s["start"]
    t.penup()
    t.setposition(x, height - y)
    if s["color"] is not None:
        t.color(s["color"])
    if s["width"] is not None:
        t.pensize(s["width"])
    t.pendown()

    for item in s["path"]:
        if isinstance(item, tuple):
            radius, extent = item
            t.circle(radius, extent)
        else:
            t.setheading(-item)


def draw_mascot(t, height=DESIGN_HEIGHT, sections=None):
    """Draw the requested sections (all of them by default) in order."""
    names = list(SECTIONS) if sections is None else list(sections)
    for name in names:
        if name not in SECTIONS:
            raise ValueError(f"Unknown mascot section: {name}")
        logger.debug("Drawing %s", name)
        for s in SECTIONS[name]:
            draw_stroke(t, s, height)
