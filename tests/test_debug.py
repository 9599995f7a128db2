from cspnet.debug import DebugCounters, DebugError


def test_counters_start_at_zero():
    counters = DebugCounters()
    assert counters.buffer_out == 0
    assert counters.conn_out == 0
    assert counters.errno is DebugError.NONE


def test_counter_wraps_at_eight_bits():
    counters = DebugCounters()
    counters.conn_ovf = 255
    counters.conn_ovf += 1
    assert counters.conn_ovf == 0


def test_counter_increments():
    counters = DebugCounters()
    counters.buffer_out += 1
    counters.buffer_out += 1
    assert counters.buffer_out == 2


def test_errno_is_kept_as_enum():
    counters = DebugCounters()
    counters.errno = DebugError.ALREADY_FREE
    assert counters.errno is DebugError.ALREADY_FREE
    counters.errno = int(DebugError.REFCOUNT)
    assert counters.errno is DebugError.REFCOUNT


def test_reset_clears_everything():
    counters = DebugCounters(buffer_out=3, conn_out=4)
    counters.errno = DebugError.CORRUPT_BUFFER
    counters.reset()
    assert counters == DebugCounters()
    assert counters.errno is DebugError.NONE