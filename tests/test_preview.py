"""Tests for the pygame preview window, run against SDL's dummy video driver."""

import numpy as np
import pytest


@pytest.fixture
def window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    from renderer.preview import PreviewWindow
    win = PreviewWindow(width=8, height=4, samples=4, max_window=4)
    yield win
    if win.open:
        win.close()


def test_window_scaled_down(window):
    assert window.window_size == (4, 2)


def test_update_draws_row(window):
    row = np.full((8, 3), 1.0)
    assert window.update(2, row) is True
    assert window.rows_done == 1
    assert (window.pixels[2] == 128).all()
    assert not window.pixels[0].any()


def test_closed_window_stops_render(window):
    window.close()
    assert window.update(0, np.zeros((8, 3))) is False
