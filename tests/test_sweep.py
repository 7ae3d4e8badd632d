"""Tests for the Wiener regularization sweep."""

import numpy as np
import pytest
from engines.pipeline import apply_filter
from engines.sweep import run_sweep, geometric_sweep
from models.filter_mode import Direction, SpectralBlur, WienerDeconvolution
from models.sweep_result import SweepEntry
from utils.constants import WIENER_K_SWEEP
from utils.exceptions import InvalidParameter


def test_default_sweep_values_and_order():
    image = np.random.rand(16, 16)
    entries = list(run_sweep(image, Direction.HORIZONTAL))
    assert len(entries) == 5
    assert [e.k for e in entries] == pytest.approx([0.0, 0.001, 0.01, 0.1, 1.0])
    assert all(isinstance(e, SweepEntry) for e in entries)


def test_sweep_is_restartable_and_deterministic():
    image = (np.random.rand(12, 20, 3) * 255).astype(np.uint8)
    sweep = run_sweep(image, Direction.VERTICAL, size=3)
    first = list(sweep)
    second = list(sweep)
    assert len(sweep) == 5
    assert [k for k, _ in first] == [k for k, _ in second]
    for (_, a), (_, b) in zip(first, second):
        assert np.array_equal(a, b)
        assert a.shape == image.shape and a.dtype == image.dtype


def test_sweep_entries_match_single_apply():
    image = np.random.rand(10, 10)
    for k, result in run_sweep(image, Direction.HORIZONTAL, size=3):
        expected = apply_filter(image, WienerDeconvolution(Direction.HORIZONTAL, k, 3))
        assert np.array_equal(result, expected)


def test_zero_regularization_entry_undoes_blur():
    plane = np.random.rand(16, 16)
    blurred = apply_filter(plane, SpectralBlur(Direction.HORIZONTAL, 9))
    k, restored = next(iter(run_sweep(blurred, Direction.HORIZONTAL, size=9)))
    assert k == 0.0
    assert np.allclose(restored, plane, atol=1e-6)


def test_sweep_is_lazy(monkeypatch):
    """Nothing is filtered until iteration."""
    import engines.sweep as sweep_module

    calls = []
    monkeypatch.setattr(sweep_module, "apply_filter", lambda img, mode: calls.append(mode.k) or img)
    sweep = run_sweep(np.zeros((10, 10)), Direction.HORIZONTAL)
    assert calls == []
    iterator = iter(sweep)
    next(iterator)
    assert calls == [0.0]


def test_run_single_value():
    entry = run_sweep(np.random.rand(10, 10), Direction.VERTICAL).run(0.5)
    assert entry.k == 0.5
    assert entry.label == "Result (k = 0.500)"


def test_invalid_inputs_fail_up_front():
    with pytest.raises(InvalidParameter):
        run_sweep(np.zeros((4, 4)), Direction.HORIZONTAL)  # default size 9 > 4
    with pytest.raises(InvalidParameter):
        run_sweep(np.zeros((16, 16)), Direction.HORIZONTAL, size=0)
    with pytest.raises(InvalidParameter):
        run_sweep(np.zeros((16, 16)), Direction.HORIZONTAL, k_values=(0.0, -1.0))
    with pytest.raises(InvalidParameter):
        run_sweep(np.zeros((16, 16)), Direction.HORIZONTAL, k_values=())


def test_geometric_sweep_matches_default():
    assert geometric_sweep() == pytest.approx(WIENER_K_SWEEP)
    assert geometric_sweep(0.01, 1.0, include_zero=False) == pytest.approx((0.01, 0.1, 1.0))


def test_geometric_sweep_rejects_bad_bounds():
    with pytest.raises(InvalidParameter):
        geometric_sweep(start=0.0)
    with pytest.raises(InvalidParameter):
        geometric_sweep(factor=1.0)


def test_zero_regularization_entry_bounded_with_default_size():
    """Width 30 is divisible by 3, so the default size-9 kernel has spectral nulls."""
    k, restored = next(iter(run_sweep(np.random.rand(30, 30), Direction.HORIZONTAL)))
    assert k == 0.0
    assert np.abs(restored).max() < 1e3

