"""
Square root benchmarks - float32 square root approximations.

The approximations are collected from:
https://www.codeproject.com/Articles/69941/Best-Square-Root-Method-Algorithm-Function-Precisi
https://dsp.stackexchange.com/questions/17269/what-approximation-techniques-exist-for-computing-the-square-root
https://en.wikipedia.org/wiki/Methods_of_computing_square_roots

All candidates assume positive, non-zero input.
"""

import numpy as np

from ...harness.runner import BenchmarkSuite, Candidate, passthrough
from ...harness.types import NumericTypes, clamp_range_positive
from ...instrumentation.bits import MANTISSA_MASK, bits_to_float, float_to_bits, to_uint32

F32 = np.float32

# Bias that centres the error of the exponent-halving trick
LOG2_BIAS = 0x4B0D2
QUAKE_MAGIC = 0x5F375A86
SQRT2 = F32(1.41421356237309504880)


def sqrtf_reference(x):
    """Square root in storage precision."""
    return np.sqrt(np.longdouble(x))


def sqrtf_std(x):
    """numpy float32 square root."""
    return np.sqrt(x)


def _log2_half(x, bias: int = 0):
    # Halving the biased exponent approximates log2(x) / 2
    return bits_to_float((1 << 29) + (float_to_bits(x) >> 1) - (1 << 22) - bias)


def sqrtf_log2_bias(x):
    """Exponent halving with a bias that lowers the mean error."""
    return _log2_half(x, LOG2_BIAS)


def sqrtf_log2_babylonian(x):
    """Exponent halving refined by two Babylonian steps."""
    u = _log2_half(x)
    u = u + x / u
    return F32(0.25) * u + x / u


def sqrtf_log2_bias_babylonian(x):
    """Biased exponent halving, two Babylonian steps folded into one division."""
    u = _log2_half(x, LOG2_BIAS)
    u2 = u * u
    return (x * x + (F32(6.0) * x + u2) * u2) / (F32(4.0) * u * (x + u2))


def sqrtf_log2_bias_bakhshali(x):
    """Biased exponent halving refined by one Bakhshali iteration."""
    u = _log2_half(x, LOG2_BIAS)
    return (u * u + x) / (F32(2.0) * u)


def _quake(x):
    return bits_to_float(QUAKE_MAGIC - (float_to_bits(x) >> 1))


def sqrtf_quake_newton(x):
    """Fast inverse square root with one Newton step, times x."""
    xhalf = F32(0.5) * x
    u = _quake(x)
    u = u * (F32(1.5) - xhalf * u * u)
    return x * u


def sqrtf_quake_halley(x):
    """Fast inverse square root with one Halley step, times x."""
    u = _quake(x)
    xu = x * u
    xu2 = xu * u
    return F32(0.125 * 3.0) * xu * (F32(5.0) - xu2 * (F32(10.0 / 3.0) - xu2))


def _intel_soc(x):
    # Intel Software Optimization Cookbook, 2nd edition, p. 187
    return bits_to_float(to_uint32(float_to_bits(x) + (127 << 23)) >> 1)


def sqrtf_intel_soc(x):
    """Add the exponent bias and shift right by one."""
    return _intel_soc(x)


def sqrtf_intel_soc_bakhshali(x):
    """Intel cookbook estimate refined by one Bakhshali iteration."""
    f = _intel_soc(x)
    return (f * f + x) / (F32(2.0) * f)


TAYLOR_COEFFS = (
    F32(0.49959804148061),
    F32(-0.12047308243453),
    F32(0.04585425015501),
    F32(-0.01076564682800),
)


def sqrtf_taylor3(x):
    """Polynomial in the mantissa, exponent halved separately."""
    bits = float_to_bits(x)
    int_part = to_uint32((bits >> 23) - 127)
    n = F32(bits & MANTISSA_MASK) * F32(1.192092895507812e-07)
    accumulator = F32(1.0)
    power = F32(1.0)
    for coeff in TAYLOR_COEFFS:
        power = power * n
        accumulator = accumulator + coeff * power
    if int_part & 1:
        # An odd exponent leaves a factor of sqrt(2)
        accumulator = accumulator * SQRT2
    return accumulator * bits_to_float(((int_part >> 1) + 127) << 23)


def sqrtf_newton_converge(x):
    """Newton's method until the estimate stops changing."""
    n = x / F32(2.0)
    last = F32(0.0)
    before_last = None
    while n != last:
        # float32 steps can settle into a cycle between two neighbours
        if n == before_last:
            break
        before_last = last
        last = n
        n = (n + x / n) / F32(2.0)
    return n


def sqrtf_bisect(x, accuracy=F32(0.01)):
    """Bisection until the bracket is narrower than 0.01."""
    if x < 1:
        lower, upper = x, F32(1.0)
    else:
        lower, upper = F32(1.0), x
    while (upper - lower) > accuracy:
        guess = (lower + upper) / F32(2.0)
        if guess == lower or guess == upper:
            break
        if guess * guess > x:
            upper = guess
        else:
            lower = guess
    return (lower + upper) / F32(2.0)


class SqrtfBenchmarkSuite(BenchmarkSuite):
    """float32 square root approximations against a long double reference."""

    name = "sqrtf"
    description = "Square root approximations for float32"
    types = NumericTypes(np.float32, np.float32, np.longdouble)
    default_range = (0.0, 65535.0)
    dummy_function = staticmethod(passthrough)
    candidates = [
        Candidate("#0", "Reference (numpy sqrt)", sqrtf_std),
        Candidate("#1", "log2(x) + bias", sqrtf_log2_bias),
        Candidate("#2", "log2(x) + Babylonian", sqrtf_log2_babylonian),
        Candidate("#3", "log2(x) + bias + Babylonian", sqrtf_log2_bias_babylonian),
        Candidate("#4", "log2(x) + bias + Bakhshali", sqrtf_log2_bias_bakhshali),
        Candidate("#5", "Quake3 + Newton", sqrtf_quake_newton),
        Candidate("#6", "Quake3 + Halley", sqrtf_quake_halley),
        Candidate("#7", "Intel SOC", sqrtf_intel_soc),
        Candidate("#8", "Intel SOC + Bakhshali", sqrtf_intel_soc_bakhshali),
        Candidate("#9", "Taylor3", sqrtf_taylor3),
        Candidate("#10", "Newton while change", sqrtf_newton_converge),
        Candidate("#11", "Newton accuracy 0.01", sqrtf_bisect),
    ]

    reference = staticmethod(sqrtf_reference)

    @classmethod
    def fixup_range(cls, input_range: tuple) -> tuple:
        return clamp_range_positive(input_range, np.float32)
