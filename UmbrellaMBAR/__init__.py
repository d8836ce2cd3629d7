"""
UmbrellaMBAR is an implementation of the multistate Bennett acceptance ratio
(MBAR) [1] method for umbrella-windowed simulations using the PyTorch [2]
library. The MBAR equation is warm-started with self-consistent iteration
and solved with a damped Newton-Raphson method.
"""

from .umbrellambar import UmbrellaMBAR, mbar, logsumexp
from .exceptions import (
    MBARError,
    ShapeError,
    DegenerateStatisticsError,
    NonConvergenceError,
    SingularHessianWarning,
)
from .reporter import ProgressReporter, PrintReporter, HistoryReporter

__all__ = [
    "UmbrellaMBAR",
    "mbar",
    "logsumexp",
    "MBARError",
    "ShapeError",
    "DegenerateStatisticsError",
    "NonConvergenceError",
    "SingularHessianWarning",
    "ProgressReporter",
    "PrintReporter",
    "HistoryReporter",
]
