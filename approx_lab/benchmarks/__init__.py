"""
Benchmark suites for approximation testing.

Each submodule holds one reference function and its candidates.
"""

from . import sqrtf
from . import invsqrtf
from . import log10f
from . import expf
from . import sqrti
from . import atan2f

__all__ = [
    "sqrtf",
    "invsqrtf",
    "log10f",
    "expf",
    "sqrti",
    "atan2f",
]
