import time
from unittest import mock

import pytest

from cspnet.clock import (
    Timestamp,
    clock_get_time,
    clock_set_time,
    get_ms,
    get_ms_isr,
    get_s,
    get_s_isr,
)


def test_get_ms_advances_after_sleep():
    before = get_ms()
    time.sleep(0.1)
    after = get_ms()
    assert after - before >= 90


def test_get_ms_isr_matches_get_ms():
    a = get_ms()
    b = get_ms_isr()
    c = get_ms()
    assert a <= b <= c


def test_get_ms_fits_in_32_bits():
    assert 0 <= get_ms() < 2**32


def test_get_s_consistent_with_ms():
    ms = get_ms()
    s = get_s()
    assert abs(s - ms // 1000) <= 1


def test_get_s_isr_matches_get_s():
    a = get_s()
    b = get_s_isr()
    assert b - a in (0, 1)


def test_clock_get_time_is_nonzero_and_normalised():
    ts = clock_get_time()
    assert ts.tv_sec != 0
    assert 0 <= ts.tv_nsec < 1_000_000_000


def test_clock_get_time_close_to_wall_clock():
    ts = clock_get_time()
    assert abs(ts.tv_sec - int(time.time())) <= 2


def test_clock_set_time_passes_nanoseconds():
    with mock.patch.object(time, "clock_settime_ns", create=True) as settime, \
            mock.patch.object(time, "CLOCK_REALTIME", 0, create=True):
        result = clock_set_time(Timestamp(tv_sec=5, tv_nsec=7))
    assert result is None
    assert settime.call_args == mock.call(0, 5_000_000_007)


def test_clock_set_time_propagates_permission_error():
    with mock.patch.object(
        time, "clock_settime_ns", create=True, side_effect=PermissionError
    ), mock.patch.object(time, "CLOCK_REALTIME", 0, create=True):
        with pytest.raises(PermissionError):
            clock_set_time(Timestamp(tv_sec=1, tv_nsec=0))