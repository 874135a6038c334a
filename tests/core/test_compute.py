"""
Tests for shared compute infrastructure.

Validates:
    - Timer: start/stop ordering, section accumulation, result keys
    - select_tolerance(): tier per scalar type
"""

import numpy as np
import pytest

from pymatrices.core.compute import (
    EXACT,
    FP16,
    FP32,
    FP64,
    Timer,
    select_tolerance,
)


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:
    """Timer records total and per-section durations."""

    def test_result_has_total_and_sections(self):
        timer = Timer()
        timer.start()
        with timer.section('expansion'):
            pass
        timer.stop()
        result = timer.result()
        assert result['total_seconds'] >= 0.0
        assert result['expansion'] >= 0.0

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('step'):
                pass
        timer.stop()
        assert set(timer.result()) == {'total_seconds', 'step'}

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section('failing'):
                raise ValueError("boom")
        timer.stop()
        assert 'failing' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


# ═══════════════════════════════════════════════════════════════════════
# Tolerance tiers
# ═══════════════════════════════════════════════════════════════════════


class TestSelectTolerance:
    """select_tolerance maps scalar types to tiers."""

    @pytest.mark.parametrize("dtype", [np.int8, np.int32, np.uint32, np.uint64])
    def test_integers_exact(self, dtype):
        tier = select_tolerance(dtype)
        assert tier is EXACT
        assert tier.rtol == 0.0 and tier.atol == 0.0

    def test_float64(self):
        assert select_tolerance(np.float64) is FP64

    def test_longdouble_uses_fp64(self):
        assert select_tolerance(np.longdouble) is FP64

    def test_float32(self):
        assert select_tolerance(np.float32) is FP32

    def test_float16(self):
        assert select_tolerance(np.float16) is FP16

    def test_tiers_relax_with_precision(self):
        assert FP64.rtol < FP32.rtol < FP16.rtol
