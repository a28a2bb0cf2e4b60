"""
Tests for the section timer.
"""

import pytest

from pyaccuracy.core.timing import Timer


class TestTimer:
    """Section timing and totals."""

    def test_result_has_total_and_sections(self):
        timer = Timer()
        timer.start()
        with timer.section('evaluate'):
            pass
        timer.stop()
        result = timer.result()
        assert result['total_seconds'] >= 0
        assert 'evaluate' in result

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('measure'):
                pass
        timer.stop()
        assert list(timer.result()) == ['total_seconds', 'measure']

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section('evaluate'):
                raise ValueError("boom")
        timer.stop()
        assert 'evaluate' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()
