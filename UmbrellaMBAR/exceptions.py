"""Errors and warnings raised while solving the MBAR equations."""


class MBARError(Exception):
    """Base class of all errors raised by UmbrellaMBAR."""


class ShapeError(MBARError, ValueError):
    """The reduced potential mapping is not square, or a series has a length
    inconsistent with the number of samples of its window."""


class DegenerateStatisticsError(MBARError, ArithmeticError):
    """The free energies became non-finite, so no convergence metric exists."""


class NonConvergenceError(MBARError, RuntimeError):
    """The refinement did not reach the tolerance within max_iterations."""


class SingularHessianWarning(RuntimeWarning):
    """Near-null directions of the Hessian were discarded by the pseudo-inverse.

    This usually means that some windows have little or no overlap with the rest.
    """
