from dataclasses import dataclass

CANVAS_WIDTH = 600
CANVAS_HEIGHT = 800
BACKGROUND = (224, 224, 224)
OUTPUT_PATH = "bdd.png"

WINDOW_TITLE = "冰墩墩"
MIN_WINDOW_SIZE = (300, 300)
INITIAL_WINDOW_SIZE = (300, 300)
CAPTION = "BEIJING 2022"
CAPTION_POS = (240, 450)
REFRESH_MS = 30

# chords per second
SPEED = 100
ARC_STEPS = 30


@dataclass
class DrawingConfig:
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    background: tuple = BACKGROUND
    output_path: str = OUTPUT_PATH
    speed: float = SPEED
    arc_steps: int = ARC_STEPS
    show_window: bool = True
    scale: float = 1.0
    log_level: str = "INFO"


def config_from_args(args):
    """Build a DrawingConfig from parsed command-line flags."""
    return DrawingConfig(
        speed=max(0.0, float(args.speed)),
        show_window=not args.no_window,
        scale=float(args.scale) if args.scale and args.scale > 0 else 1.0,
        log_level=args.log_level.upper(),
    )
