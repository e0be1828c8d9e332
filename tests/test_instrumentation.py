import gc

import numpy as np

from approx_lab.instrumentation import (
    DiscardSink,
    Timer,
    bits_to_float,
    float_to_bits,
    float_to_signed_bits,
    timed,
    to_uint32,
)


def test_float_bit_patterns() -> None:
    assert float_to_bits(1.0) == 0x3F800000
    assert float_to_bits(np.float32(-2.0)) == 0xC0000000
    assert float_to_signed_bits(-0.0) == -(2 ** 31)


def test_bits_to_float_masks_to_32_bits() -> None:
    value = bits_to_float(0x40000000)
    assert isinstance(value, np.float32)
    assert value == 2.0
    assert bits_to_float((1 << 40) | 0x3F800000) == 1.0


def test_to_uint32_wraps() -> None:
    assert to_uint32(-1) == 0xFFFFFFFF
    assert to_uint32(0x1_0000_0005) == 5


def test_timer_with_fake_clock() -> None:
    ticks = iter([100, 350])
    timer = Timer("fake", clock=lambda: next(ticks))

    timer.start()
    assert timer.running
    timer.stop()

    assert not timer.running
    assert timer.elapsed_ns == 250
    assert timer.elapsed_ms == 250 / 1_000_000


def test_timer_never_reports_negative_time() -> None:
    ticks = iter([500, 100])
    timer = Timer("backwards", clock=lambda: next(ticks)).start().stop()
    assert timer.elapsed_ns == 0


def test_timed_pauses_and_restores_gc() -> None:
    assert gc.isenabled()
    with timed("region") as timer:
        assert not gc.isenabled()
        sum(range(100))
    assert gc.isenabled()
    assert timer.elapsed_ns >= 0


def test_timed_leaves_disabled_gc_disabled() -> None:
    gc.disable()
    try:
        with timed("region"):
            pass
        assert not gc.isenabled()
    finally:
        gc.enable()


def test_discard_sink_keeps_last_value() -> None:
    sink = DiscardSink()
    for i in range(3):
        sink.value = i
    assert sink.value == 2
