"""Tests for the shared drawing session and the background drawing thread."""

from __future__ import annotations

import threading

import numpy as np
import pytest

import dwenanimator
from dwen_frame_manager import DrawingSession
from dwenanimator import no_delay, run_drawing, sleep_delay, speed_delay, start_drawing
from dwencanvas import Canvas, CanvasSaveError, load_image
from tests.conftest import BLACK, WHITE


def _square(t):
    t.setposition(10, 10)
    for _ in range(4):
        t.forward(30)
        t.turn(90)


class TestDrawingSession:
    def test_completion_flag(self, canvas):
        session = DrawingSession(canvas)
        assert not session.is_complete
        session.complete()
        session.complete()
        assert session.is_complete
        assert session.wait(timeout=0)

    def test_wait_times_out_while_drawing(self, canvas):
        assert DrawingSession(canvas).wait(timeout=0.01) is False

    def test_default_caption(self, canvas):
        assert DrawingSession(canvas).caption == "BEIJING 2022"

    def test_latest_frame_only_when_changed(self, canvas):
        session = DrawingSession(canvas)
        generation, pixels = session.latest_frame()
        assert pixels.shape == (100, 100, 3)
        assert session.latest_frame(since=generation) is None

        canvas.set_pixel(1, 1, BLACK)
        newer = session.latest_frame(since=generation)
        assert newer is not None
        assert newer[0] > generation
        assert tuple(newer[1][1, 1]) == BLACK

    def test_fail_records_error_and_releases_waiters(self, canvas):
        session = DrawingSession(canvas)
        err = RuntimeError("boom")
        session.fail(err)
        assert session.error is err
        assert session.is_complete


class TestDelays:
    def test_zero_seconds_is_no_delay(self):
        assert sleep_delay(0) is no_delay
        assert sleep_delay(-1) is no_delay

    def test_zero_speed_is_no_delay(self):
        assert speed_delay(0) is no_delay
        assert speed_delay(None) is no_delay

    def test_speed_maps_to_seconds_per_chord(self, monkeypatch):
        slept = []
        monkeypatch.setattr(dwenanimator.time, "sleep", slept.append)
        speed_delay(100)()
        sleep_delay(0.5)()
        assert slept == [pytest.approx(0.01), 0.5]


class TestRunDrawing:
    def test_draws_flags_and_saves(self, canvas, tmp_path):
        session = DrawingSession(canvas)
        out = tmp_path / "drawing.png"
        t = run_drawing(session, _square, out)

        assert session.is_complete
        assert t.position() == pytest.approx((10.0, 10.0))
        assert canvas.get_pixel(25, 10) == BLACK
        assert np.array_equal(load_image(out), canvas.pixels)

    def test_throttle_is_used_for_arcs(self, canvas, tmp_path):
        calls = []
        session = DrawingSession(canvas)
        run_drawing(session, lambda t: t.circle(10, 90), tmp_path / "arc.png",
                    delay=lambda: calls.append(1), arc_steps=6)
        assert len(calls) == 6

    def test_save_failure_propagates(self, canvas, tmp_path):
        session = DrawingSession(canvas)
        with pytest.raises(CanvasSaveError):
            run_drawing(session, _square, tmp_path / "nope" / "drawing.png")
        assert session.is_complete


class TestStartDrawing:
    def test_background_thread_completes(self, canvas, tmp_path):
        session = DrawingSession(canvas)
        out = tmp_path / "threaded.png"
        worker = start_drawing(session, _square, out)
        worker.join(timeout=10)

        assert not worker.is_alive()
        assert worker.daemon
        assert session.is_complete
        assert session.error is None
        assert out.exists()

    def test_failure_is_stored_on_the_session(self, canvas, tmp_path):
        def broken(t):
            t.forward(5)
            raise RuntimeError("script broke")

        session = DrawingSession(canvas)
        worker = start_drawing(session, broken, tmp_path / "never.png")
        worker.join(timeout=10)

        assert session.is_complete
        assert isinstance(session.error, RuntimeError)
        assert not (tmp_path / "never.png").exists()

    def test_frames_stay_consistent_while_drawing(self, tmp_path):
        canvas = Canvas(200, 200, WHITE)
        session = DrawingSession(canvas)
        release = threading.Event()

        def busy(t):
            release.wait(timeout=10)
            t.setposition(100, 100)
            for i in range(200):
                t.circle(20 + i % 50, 45)

        worker = start_drawing(session, busy, tmp_path / "busy.png")
        release.set()
        seen = None
        while not session.is_complete:
            latest = session.latest_frame(since=seen)
            if latest is not None:
                generation, pixels = latest
                assert seen is None or generation > seen
                assert pixels.shape == (200, 200, 3)
                seen = generation
        worker.join(timeout=10)
        assert session.error is None
