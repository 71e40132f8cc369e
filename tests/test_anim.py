import pytest

from circuitos.anim import MatrixAnim


class CountingAnim(MatrixAnim):
    def __init__(self, matrix):
        super().__init__(matrix)
        self.starts = 0
        self.stops = 0
        self.resets = 0

    def reset(self):
        self.resets += 1

    def on_start(self):
        self.starts += 1

    def on_stop(self):
        self.stops += 1


def test_base_is_abstract():
    with pytest.raises(TypeError):
        MatrixAnim(None)


def test_matrix_property_returns_owner():
    owner = object()
    anim = CountingAnim(owner)
    MatrixAnim.start(anim)
    assert anim.matrix is owner
    assert anim.starts == 1


def test_start_runs_hook_once():
    anim = CountingAnim(None)
    assert anim.is_started is False
    MatrixAnim.start(anim)
    MatrixAnim.start(anim)
    assert anim.is_started is True
    assert anim.starts == 1


def test_stop_only_when_started():
    anim = CountingAnim(None)
    MatrixAnim.stop(anim)
    assert anim.stops == 0
    MatrixAnim.start(anim)
    MatrixAnim.stop(anim)
    MatrixAnim.stop(anim)
    assert anim.stops == 1
    assert anim.is_started is False


def test_restart_after_stop():
    anim = CountingAnim(None)
    MatrixAnim.start(anim)
    MatrixAnim.stop(anim)
    MatrixAnim.start(anim)
    assert (anim.starts, anim.stops) == (2, 1)