import logging
import threading
import time
from dwenturtle import Turtle

logger = logging.getLogger(__name__)


def no_delay():
    pass


def sleep_delay(seconds):
    """Return a per-chord pause that sleeps ``seconds``."""
    if seconds <= 0:
        return no_delay

    def _sleep():
        time.sleep(seconds)

    return _sleep


def speed_delay(speed):
    """Pause matching ``speed`` chords per second (0 disables throttling)."""
    if not speed or speed <= 0:
        return no_delay
    return sleep_delay(1.0 / speed)


def run_drawing(session, script, output_path, delay=no_delay, arc_steps=30):
    """Run ``script(turtle)`` over the session canvas, flag completion and save."""
    t = Turtle(session.canvas, delay=delay, arc_steps=arc_steps)
    started = time.perf_counter()
    logger.info("Drawing started on %dx%d canvas", session.canvas.width, session.canvas.height)

    script(t)

    session.complete()
    logger.info("Drawing finished in %.2fs", time.perf_counter() - started)
    session.canvas.save_image(output_path)
    return t


def start_drawing(session, script, output_path, delay=no_delay, arc_steps=30):
    """Run the drawing on a daemon thread so the window keeps the main thread."""

    def _worker():
        try:
            run_drawing(session, script, output_path, delay=delay, arc_steps=arc_steps)
        except Exception as e:
            logger.exception("Drawing thread failed")
            session.fail(e)

    worker = threading.Thread(target=_worker, name="dwen-drawing", daemon=True)
    worker.start()
    return worker
