"""Unit tests for procutil.profiling.rates."""

import pytest

from procutil.errors import InvalidRateError, UnknownKnobError
from procutil.profiling.rates import DISABLED_RATES, ENABLED_RATES, ProfilingRates


def test_enabled_rates_constants():
    """Enabled rates: block/cpu 1000, mutex/heap 10."""
    assert ENABLED_RATES.as_dict() == {"heap": 10, "block": 1000, "cpu": 1000, "mutex": 10}


def test_disabled_rates_are_zero():
    """Disabled rates are all zero and nothing is active."""
    assert DISABLED_RATES == ProfilingRates(0, 0, 0, 0)
    assert DISABLED_RATES.active() == ()


def test_knobs_order():
    """Knob names are listed in declaration order."""
    assert ProfilingRates.knobs() == ("heap", "block", "cpu", "mutex")


def test_with_rate_changes_only_one_knob():
    """with_rate returns a copy differing in one knob."""
    rates = ENABLED_RATES.with_rate("cpu", 250)
    assert rates.cpu == 250
    assert rates.get("heap") == 10
    assert ENABLED_RATES.cpu == 1000


def test_active_lists_nonzero_knobs():
    """active() names exactly the knobs with nonzero rates."""
    assert ProfilingRates(heap=0, block=5, cpu=0, mutex=1).active() == ("block", "mutex")


def test_negative_rate_rejected():
    """Negative rates raise InvalidRateError."""
    with pytest.raises(InvalidRateError):
        ProfilingRates(cpu=-1)


@pytest.mark.parametrize("call", [lambda r: r.get("gpu"), lambda r: r.with_rate("gpu", 1)])
def test_unknown_knob_rejected(call):
    """Unknown knob names raise UnknownKnobError."""
    with pytest.raises(UnknownKnobError):
        call(DISABLED_RATES)
