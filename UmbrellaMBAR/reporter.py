import numpy as np


class ProgressReporter:
    """Receives the progress of an MBAR run.

    The solver calls report_iteration once per self-consistent sweep and once
    per refinement iteration, then report_result once with the final free
    energies. The base class ignores everything; subclass it to log or record.
    """

    def report_iteration(self, phase, iteration, delta, tolerance, f_k):
        pass

    def report_result(self, f_k):
        pass


class PrintReporter(ProgressReporter):
    """Prints the progress as plain text."""

    def report_iteration(self, phase, iteration, delta, tolerance, f_k):
        print(f"{iteration}th iteration  delta = {delta:e}  tolerance = {tolerance:e}")
        print("free energies = " + _format_free_energies(f_k))
        print("")

    def report_result(self, f_k):
        print("free energies = " + _format_free_energies(f_k))
        print("")


class HistoryReporter(ProgressReporter):
    """Keeps (phase, iteration, delta) for every reported iteration."""

    def __init__(self):
        self.history = []
        self.result = None

    def report_iteration(self, phase, iteration, delta, tolerance, f_k):
        self.history.append((phase, iteration, delta))

    def report_result(self, f_k):
        self.result = np.array(f_k, dtype=np.float64)

    def deltas(self, phase=None):
        return [d for p, _, d in self.history if phase is None or p == phase]


def _format_free_energies(f_k):
    return " ".join(f"{float(f):f}" for f in np.asarray(f_k))
