import argparse
import logging
import sys
from dwen_config import CAPTION, SPEED, config_from_args
from dwencanvas import Canvas, CanvasSaveError, InvalidDimensionError
from dwen_frame_manager import DrawingSession
from dwenanimator import run_drawing, speed_delay, start_drawing
from dwenpanda import draw_mascot
from dwenwindow import DrawingWindow
from logger import setup_logging

logger = logging.getLogger(__name__)


def build_parser():
    ap = argparse.ArgumentParser(description="Draw Bing Dwen Dwen with a turtle and save it as a PNG.")
    ap.add_argument("--speed", type=float, default=SPEED, help="Arc chords drawn per second (0 = no delay)")
    ap.add_argument("--no-window", action="store_true", help="Draw and save without opening a window")
    ap.add_argument("--scale", type=float, default=1.0, help="Window zoom factor")
    ap.add_argument("--log-level", default="INFO")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    setup_logging(config.log_level)

    try:
        canvas = Canvas(config.width, config.height, config.background)
    except InvalidDimensionError as e:
        logger.critical("Cannot create canvas: %s", e)
        return 1

    session = DrawingSession(canvas, caption=CAPTION)
    delay = speed_delay(config.speed)

    def script(t):
        draw_mascot(t, height=canvas.height)

    if not config.show_window:
        try:
            run_drawing(session, script, config.output_path, delay=delay, arc_steps=config.arc_steps)
        except CanvasSaveError as e:
            logger.critical("%s", e)
            return 1
        return 0

    window = DrawingWindow(session, scale=config.scale)
    start_drawing(session, script, config.output_path, delay=delay, arc_steps=config.arc_steps)
    window.run()

    if session.error is not None:
        logger.critical("Drawing failed: %s", session.error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
