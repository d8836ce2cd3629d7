from typing import Union
import math
import numbers
import warnings
import torch
import numpy as np
import scipy.optimize as optimize

from .exceptions import (
    ShapeError,
    DegenerateStatisticsError,
    NonConvergenceError,
    SingularHessianWarning,
)
from .reporter import ProgressReporter, PrintReporter


class UmbrellaMBAR:
    """
    The UmbrellaMBAR class is initialized with the reduced potential energies
    of umbrella-windowed simulations. The MBAR equation is solved in the
    constructor, first by a few self-consistent sweeps and then by a damped
    Newton-Raphson refinement. Therefore, the relative free energies of the
    windows are available right after construction through the property **F**.
    The method **calculate_free_energies_of_perturbed_states** can be used
    to calculate the relative free energies of perturbed states.
    """

    def __init__(
        self,
        u_kl,
        tolerance: float = 1e-8,
        max_iterations: int = 300,
        num_self_consistent_iterations: int = 5,
        first_step_factor: float = 0.1,
        step_factor: float = 1.0,
        pinv_cutoff: float = 1e-10,
        std_floor: float = 1e-10,
        reference_window: int = 0,
        method: str = "Newton",
        reporter: Union[ProgressReporter, None] = None,
        verbose: bool = False,
    ) -> None:
        """Initializer for the class UmbrellaMBAR

        Parameters
        ----------
        u_kl : dict or K x K nested sequence of 1D arrays
            u_kl[k][l] (or u_kl[(k, l)] for a dict) is the reduced (unitless)
            potential energy of the snapshots sampled in window k evaluated
            under the bias of window l. Its length N_k depends only on k.
            For a dict, the windows are ordered by their sorted labels.
            A dense ndarray of shape (K, K, N) is accepted as well.
        tolerance: float, optional (default=1e-8)
            the Newton-Raphson refinement stops when the convergence metric,
            max|f_new - f_old| / std(f_new), falls below tolerance.
        max_iterations: int, optional (default=300)
            maximum number of refinement iterations. NonConvergenceError is
            raised when it is exceeded.
        num_self_consistent_iterations: int, optional (default=5)
            number of self-consistent sweeps used to warm-start the refinement.
        first_step_factor: float, optional (default=0.1)
            damping of the first Newton-Raphson step.
        step_factor: float, optional (default=1.0)
            damping of every later Newton-Raphson step.
        pinv_cutoff: float, optional (default=1e-10)
            eigenvalues of the Hessian with an absolute value below pinv_cutoff
            are discarded when the Newton-Raphson step is computed.
        std_floor: float, optional (default=1e-10)
            when the standard deviation of the free energies is below std_floor,
            the convergence metric is the unscaled maximum change.
        reference_window: int, optional (default=0)
            index of the window whose free energy is fixed at zero.
        method: str, optional (default="Newton")
            the refinement method, "Newton" or "L-BFGS-B".
        reporter: ProgressReporter, optional (default=None)
            receives the progress of every sweep and iteration.
        verbose: bool, optional (default=False)
            if verbose is true and no reporter is given, the progress is printed.
        """

        #### check the options
        _check_positive_real("tolerance", tolerance)
        _check_positive_real("pinv_cutoff", pinv_cutoff)
        _check_positive_real("first_step_factor", first_step_factor)
        _check_positive_real("step_factor", step_factor)
        _check_non_negative_real("std_floor", std_floor)
        _check_positive_int("max_iterations", max_iterations)
        _check_non_negative_int(
            "num_self_consistent_iterations", num_self_consistent_iterations
        )
        _check_non_negative_int("reference_window", reference_window)

        if not isinstance(method, str):
            raise TypeError("method has to be a string.")
        if method not in ["Newton", "L-BFGS-B"]:
            raise ValueError("method has to be Newton or L-BFGS-B.")

        if not isinstance(verbose, bool):
            raise TypeError("verbose has to be a boolean.")
        if reporter is not None and not isinstance(reporter, ProgressReporter):
            raise TypeError("reporter has to be a ProgressReporter.")
        if reporter is None and verbose:
            reporter = PrintReporter()

        self.tolerance = float(tolerance)
        self.max_iterations = max_iterations
        self.num_self_consistent_iterations = num_self_consistent_iterations
        self.first_step_factor = float(first_step_factor)
        self.step_factor = float(step_factor)
        self.pinv_cutoff = float(pinv_cutoff)
        self.std_floor = float(std_floor)
        self.method = method
        self.reporter = reporter
        self.verbose = verbose

        #### convert the ragged input into a dense tensor
        self.u_kln, self.N_k, self.mask = assemble_tensor(u_kl)
        self.K = self.u_kln.shape[0]
        self.N = int(torch.sum(self.N_k))

        if reference_window >= self.K:
            raise ValueError(
                f"reference_window has to be smaller than the number of windows ({self.K})."
            )
        self.reference_window = reference_window

        ## solve the MBAR equation
        self._F = _solve_mbar(
            self.u_kln,
            self.N_k,
            tolerance=self.tolerance,
            max_iterations=self.max_iterations,
            num_self_consistent_iterations=self.num_self_consistent_iterations,
            first_step_factor=self.first_step_factor,
            step_factor=self.step_factor,
            pinv_cutoff=self.pinv_cutoff,
            std_floor=self.std_floor,
            reference_window=self.reference_window,
            method=self.method,
            reporter=self.reporter,
        )

        self._log_prob_mix = _log_denominator(self.N_k, self._F, self.u_kln)[self.mask]
        self._DeltaF = self._F[None, :] - self._F[:, None]

    @property
    def F(self) -> np.ndarray:
        """Free energies of the windows, with the free energy of the reference
        window fixed at zero."""
        return self._F.numpy()

    @property
    def DeltaF(self) -> np.ndarray:
        """Free energy difference between windows.
        :math:`\\mathrm{DeltaF}[i,j]` is the free energy difference between window j
        and window i, i.e., :math:`\\mathrm{DeltaF}[i,j] = F[j] - F[i]` .
        """
        return self._DeltaF.numpy()

    @property
    def num_conf(self) -> np.ndarray:
        """number of snapshots sampled from each window"""
        return self.N_k.numpy().astype(np.int64)

    @property
    def log_prob_mix(self) -> np.ndarray:
        """log of the mixture denominator :math:`\\sum_k N_k \\exp(F_k - u_k)`
        of every pooled snapshot, ordered window by window."""
        return self._log_prob_mix.numpy()

    def calculate_free_energies_of_perturbed_states(self, u_perturbed):
        """calculate free energies for perturbed states.

        Parameters
        -----------
        u_perturbed: sequence of K float ndarrays
            u_perturbed[k] has a shape of (L, N_k) or (N_k,) and the value
            u_perturbed[k][l, n] is the reduced energy of the n'th snapshot
            of window k in the l'th perturbed state.

        Returns
        -------
        results: dict
            a dictionary containing the following keys:

            **F** - the free energies of the perturbed states, relative to the
            reference window.

            **DeltaF** - :math:`\\mathrm{DeltaF}[k,l]` is the free energy difference between
            state :math:`k` and state :math:`l`, i.e., :math:`\\mathrm{DeltaF}[k,l] = F[l] - F[k]` .
        """

        if len(u_perturbed) != self.K:
            raise ShapeError(
                f"u_perturbed has to contain one array per window ({self.K})."
            )

        L = None
        energy_perturbed = []
        for k in range(self.K):
            u = _as_float64_array(u_perturbed[k])
            if u.ndim == 1:
                u = u[None, :]
            if u.ndim != 2 or u.shape[1] != int(self.N_k[k]):
                raise ShapeError(
                    f"u_perturbed[{k}] has to have a shape of (L, {int(self.N_k[k])})."
                )
            if L is None:
                L = u.shape[0]
            elif u.shape[0] != L:
                raise ShapeError(
                    "all entries of u_perturbed have to describe the same number of states."
                )
            energy_perturbed.append(torch.tensor(u))
        energy_perturbed = torch.cat(energy_perturbed, dim=1)

        du = energy_perturbed + self._log_prob_mix
        F = -logsumexp(-du, dim=1)
        DeltaF = F[None, :] - F[:, None]

        results = {
            "F": F.numpy(),
            "DeltaF": DeltaF.numpy(),
        }

        return results


def mbar(u_kl, tolerance=1e-8, **kwargs):
    """Calculate the free energy differences of umbrella-windowed systems
    with the multistate Bennett acceptance ratio method (MBAR).

    Parameters
    ----------
    u_kl : dict or K x K nested sequence of 1D arrays
        reduced potential energy of the snapshots of umbrella window k
        evaluated under umbrella window l.
    tolerance : float, optional (default=1e-8)
        tolerance of the Newton-Raphson refinement.
    **kwargs
        any other option of UmbrellaMBAR.

    Returns
    -------
    f_k : 1D ndarray of size K
        dimensionless free energies of the windows, f_k[reference_window] = 0.

    References
    ----------
    [1] M. R. Shirts and J. D. Chodera, J Chem Phys 129, 124105 (2008).
    [2] Z. Tan, Journal of the American Statistical Association 99, 1027 (2004).
    [3] C. H. Bennett, J Comput Phys 22, 245 (1976).
    """
    return UmbrellaMBAR(u_kl, tolerance=tolerance, **kwargs).F


def logsumexp(x, dim=None):
    """Compute log(sum(exp(x))) without overflow.

    The largest element is factored out, so that
    logsumexp(x) = max(x) + log(sum(exp(x - max(x)))).

    Parameters
    ----------
    x: ndarray, tensor or sequence of floats
        must not be empty.
    dim: int, optional (default=None)
        the dimension to reduce. If None, all elements are reduced.

    Returns
    -------
    s: tensor of float64
        a 0-D tensor if dim is None.
    """
    if isinstance(x, torch.Tensor):
        x = x.double()
    else:
        x = torch.as_tensor(np.asarray(x, dtype=np.float64))

    if x.numel() == 0:
        raise ValueError("logsumexp needs at least one element.")

    if dim is None:
        x = x.reshape(-1)
        dim = 0

    max_x = torch.amax(x, dim=dim, keepdim=True)
    ## all -inf (or an inf) along dim: shifting by it would give nan
    max_x = torch.where(torch.isfinite(max_x), max_x, torch.zeros_like(max_x))
    exp_x = torch.exp(x - max_x)
    s = torch.log(torch.sum(exp_x, dim=dim)) + max_x.squeeze(dim)
    return s


def assemble_tensor(u_kl):
    """Convert K x K ragged reduced potential series into a dense tensor.

    Parameters
    ----------
    u_kl : dict or K x K nested sequence of 1D arrays
        see UmbrellaMBAR.

    Returns
    -------
    u_kln : 3D float64 tensor of shape (K, K, N_max)
        u_kln[k, l, n] is the reduced energy of the n'th snapshot of window k
        evaluated under window l. Entries with n >= N_k[k] are zero.
    N_k : 1D float64 tensor of size K
        number of snapshots of every window.
    mask : 2D bool tensor of shape (K, N_max)
        mask[k, n] is True iff n < N_k[k].
    """
    rows = _as_nested_series(u_kl)

    K = len(rows)
    if K == 0:
        raise ShapeError("u_kl has to contain at least one window.")
    for k, row in enumerate(rows):
        if len(row) != K:
            raise ShapeError(
                f"u_kl has to be square: there are {K} rows but row {k} has {len(row)} columns."
            )

    N_k = []
    for k in range(K):
        for l in range(K):
            if rows[k][l].ndim != 1:
                raise ShapeError(f"u_kl[{k}][{l}] has to be a 1-D sequence.")
        n = rows[k][0].shape[0]
        if n == 0:
            raise ShapeError(f"no snapshots are sampled from window {k}.")
        for l in range(1, K):
            if rows[k][l].shape[0] != n:
                raise ShapeError(
                    f"u_kl[{k}][{l}] has {rows[k][l].shape[0]} entries, "
                    f"but window {k} has {n} snapshots."
                )
        N_k.append(n)
    N_max = max(N_k)

    u_kln = torch.zeros((K, K, N_max), dtype=torch.float64)
    for k in range(K):
        for l in range(K):
            u_kln[k, l, 0 : N_k[k]] = torch.tensor(rows[k][l])

    N_k = torch.tensor(N_k, dtype=torch.float64)
    mask = _valid_mask(N_k, N_max)

    return u_kln, N_k, mask


def log_wi_jn(N_k, f_k, u_kln, u_kn, K, N_max, log_denominator=None):
    """Compute the log weights of all pooled snapshots for one target window.

    For the target window i, with u_kn = u_kln[:, i, :],

        log_w[j, n] = -u_kn[j, n] - log(sum_k N_k[k] * exp(f_k[k] - u_kln[j, k, n]))

    so that exp(log_w + f_k[i]) is the normalized importance weight of
    snapshot n of window j under window i, and f_k[i] = -logsumexp(log_w)
    is the MBAR equation.

    Parameters
    ----------
    N_k: 1D tensor of size K
    f_k: 1D tensor of size K
    u_kln: 3D tensor of shape (K, K, N_max)
    u_kn: 2D tensor of shape (K, N_max)
    K: int
    N_max: int
    log_denominator: 2D tensor of shape (K, N_max), optional
        the logsumexp term above. It does not depend on the target window
        and can be computed once for all windows with the same f_k.

    Returns
    -------
    log_w: 1D tensor over the valid pooled snapshots, window by window.
    """
    if u_kn.shape != (K, N_max):
        raise ShapeError(f"u_kn has to have a shape of ({K}, {N_max}).")
    if log_denominator is None:
        log_denominator = _log_denominator(N_k, f_k, u_kln)
    log_w = -u_kn - log_denominator
    return log_w[_valid_mask(N_k, N_max)]


def convergence_metric(f_old, f_new, std_floor=1e-10):
    """max|f_new - f_old| divided by the standard deviation of f_new.

    The unscaled maximum change is returned when there is a single window
    or when the standard deviation of f_new is below std_floor.
    """
    f_old = torch.as_tensor(f_old, dtype=torch.float64)
    f_new = torch.as_tensor(f_new, dtype=torch.float64)

    if not (torch.all(torch.isfinite(f_old)) and torch.all(torch.isfinite(f_new))):
        raise DegenerateStatisticsError(
            "free energies are not finite; check the overlap between windows."
        )
    if f_new.numel() == 0:
        return 0.0

    max_change = torch.max(torch.abs(f_new - f_old)).item()
    if f_new.numel() < 2:
        return max_change
    std = torch.std(f_new).item()
    if std < std_floor:
        return max_change
    return max_change / std


def self_consistent_iteration(
    f_k,
    u_kln,
    N_k,
    num_iterations=5,
    reference_window=0,
    tolerance=1e-8,
    std_floor=1e-10,
    reporter=None,
    start_iteration=0,
):
    """Refine f_k with a fixed number of self-consistent sweeps.

    Every sweep evaluates f_k_new[i] = -logsumexp(log_wi_jn(i)) for all
    windows from the same f_k, shifts it so that the reference window is
    zero and then replaces f_k. The number of sweeps does not depend on
    the convergence metric; tolerance is only reported.
    """
    for count_iteration in range(num_iterations):
        f_k_new = _closed_form_free_energies(f_k, u_kln, N_k, reference_window)
        delta = convergence_metric(f_k, f_k_new, std_floor)
        f_k = f_k_new

        if reporter is not None:
            reporter.report_iteration(
                "self-consistent",
                start_iteration + count_iteration + 1,
                delta,
                tolerance,
                f_k.numpy().copy(),
            )

    return f_k


def newton_raphson_step(f_k, u_kln, N_k, gamma=1.0, reference_window=0, pinv_cutoff=1e-10):
    """One damped Newton-Raphson step on the free energies of all windows
    except the reference window."""
    K = u_kln.shape[0]
    free = _free_windows(K, reference_window)

    W_nk = _weight_matrix(f_k, u_kln, N_k)
    NW_nk = (W_nk * N_k)[:, free]

    ## gradient: N_i - N_i * sum_n W_ni
    g = N_k[free] - torch.sum(NW_nk, dim=0)

    ## hessian: -sum N_i W_i (1 - N_i W_i) on the diagonal,
    ## sum (N_i W_i) (N_j W_j) off the diagonal
    H = NW_nk.T @ NW_nk - torch.diag(torch.sum(NW_nk, dim=0))

    Hinvg = _regularized_solve(H, g, pinv_cutoff)

    f_k_new = f_k.clone()
    f_k_new[free] = f_k[free] - gamma * Hinvg
    return f_k_new


def newton_raphson_iteration(
    f_k,
    u_kln,
    N_k,
    tolerance=1e-8,
    max_iterations=300,
    first_step_factor=0.1,
    step_factor=1.0,
    reference_window=0,
    pinv_cutoff=1e-10,
    std_floor=1e-10,
    reporter=None,
    start_iteration=0,
):
    """Iterate Newton-Raphson steps until the convergence metric is below
    tolerance. The first step is damped by first_step_factor and every later
    step by step_factor.

    Raises NonConvergenceError after max_iterations steps.
    """
    delta = math.inf
    count_iteration = 0
    while delta > tolerance:
        if count_iteration >= max_iterations:
            raise NonConvergenceError(
                f"the Newton-Raphson iteration did not converge in {max_iterations} "
                f"iterations (delta = {delta:e}, tolerance = {tolerance:e})."
            )

        if count_iteration == 0:
            gamma = first_step_factor
        else:
            gamma = step_factor

        f_k_new = newton_raphson_step(
            f_k, u_kln, N_k, gamma, reference_window, pinv_cutoff
        )
        delta = convergence_metric(f_k, f_k_new, std_floor)
        f_k = f_k_new

        count_iteration += 1
        if reporter is not None:
            reporter.report_iteration(
                "newton-raphson",
                start_iteration + count_iteration,
                delta,
                tolerance,
                f_k.numpy().copy(),
            )

    return f_k


def _solve_mbar(
    u_kln,
    N_k,
    tolerance,
    max_iterations,
    num_self_consistent_iterations,
    first_step_factor,
    step_factor,
    pinv_cutoff,
    std_floor,
    reference_window,
    method,
    reporter=None,
):
    K = u_kln.shape[0]
    f_k = u_kln.new_zeros(K)

    f_k = self_consistent_iteration(
        f_k,
        u_kln,
        N_k,
        num_iterations=num_self_consistent_iterations,
        reference_window=reference_window,
        tolerance=tolerance,
        std_floor=std_floor,
        reporter=reporter,
    )

    if method == "Newton":
        f_k = newton_raphson_iteration(
            f_k,
            u_kln,
            N_k,
            tolerance=tolerance,
            max_iterations=max_iterations,
            first_step_factor=first_step_factor,
            step_factor=step_factor,
            reference_window=reference_window,
            pinv_cutoff=pinv_cutoff,
            std_floor=std_floor,
            reporter=reporter,
            start_iteration=num_self_consistent_iterations,
        )
    elif method == "L-BFGS-B":
        f_k = _lbfgsb_iteration(
            f_k,
            u_kln,
            N_k,
            tolerance=tolerance,
            max_iterations=max_iterations,
            reference_window=reference_window,
            std_floor=std_floor,
            reporter=reporter,
            start_iteration=num_self_consistent_iterations,
        )

    ## recompute all free energies
    f_k = _closed_form_free_energies(f_k, u_kln, N_k, reference_window)
    if not torch.all(torch.isfinite(f_k)):
        raise DegenerateStatisticsError(
            "free energies are not finite; check the overlap between windows."
        )

    if reporter is not None:
        reporter.report_result(f_k.numpy().copy())

    return f_k


def _lbfgsb_iteration(
    f_k,
    u_kln,
    N_k,
    tolerance=1e-8,
    max_iterations=300,
    reference_window=0,
    std_floor=1e-10,
    reporter=None,
    start_iteration=0,
):
    """Minimize the negative log-likelihood of MBAR over the free energies
    of all windows except the reference window with L-BFGS-B."""
    K = u_kln.shape[0]
    free = _free_windows(K, reference_window)
    if free.numel() == 0:
        return f_k

    mask = _valid_mask(N_k, u_kln.shape[2])
    N = torch.sum(N_k)

    def _full(x):
        f = f_k.clone()
        f[free] = torch.tensor(np.asarray(x, dtype=np.float64))
        return f

    def _loss_and_grad(x):
        f = _full(x)
        log_denominator = _log_denominator(N_k, f, u_kln)
        loss = (torch.sum(log_denominator[mask]) - torch.sum(N_k * f)) / N

        W_nk = _weight_matrix(f, u_kln, N_k, log_denominator)
        grad = (torch.sum(W_nk * N_k, dim=0) - N_k) / N
        return loss.item(), grad[free].numpy()

    state = {"f_k": f_k, "count_iteration": 0}

    def _callback(x):
        f = _full(x)
        delta = convergence_metric(state["f_k"], f, std_floor)
        state["f_k"] = f
        state["count_iteration"] += 1
        if reporter is not None:
            reporter.report_iteration(
                "l-bfgs-b",
                start_iteration + state["count_iteration"],
                delta,
                tolerance,
                f.numpy().copy(),
            )

    results = optimize.minimize(
        _loss_and_grad,
        f_k[free].numpy(),
        jac=True,
        method="L-BFGS-B",
        tol=1e-12,
        options={"maxiter": max_iterations, "gtol": tolerance},
        callback=_callback,
    )

    if results.status == 1:
        raise NonConvergenceError(
            f"the L-BFGS-B iteration did not converge in {max_iterations} "
            f"iterations: {results.message}"
        )

    return _full(results.x)


def _log_denominator(N_k, f_k, u_kln):
    ## log(sum_k N_k exp(f_k - u_kln[j, k, n])) for every snapshot (j, n)
    return logsumexp(
        torch.log(N_k)[None, :, None] + f_k[None, :, None] - u_kln, dim=1
    )


def _closed_form_free_energies(f_k, u_kln, N_k, reference_window):
    K, N_max = u_kln.shape[0], u_kln.shape[2]
    log_denominator = _log_denominator(N_k, f_k, u_kln)

    ## f_k is only read here, the new estimate goes into its own tensor
    f_k_new = f_k.new_empty(K)
    for i in range(K):
        log_w = log_wi_jn(
            N_k, f_k, u_kln, u_kln[:, i, :], K, N_max, log_denominator
        )
        f_k_new[i] = -logsumexp(log_w)

    return f_k_new - f_k_new[reference_window]


def _weight_matrix(f_k, u_kln, N_k, log_denominator=None):
    ## W_nk[:, i] = exp(log_wi_jn(i) + f_k[i]) over the pooled snapshots
    K, N_max = u_kln.shape[0], u_kln.shape[2]
    if log_denominator is None:
        log_denominator = _log_denominator(N_k, f_k, u_kln)

    W_nk = torch.stack(
        [
            torch.exp(
                log_wi_jn(N_k, f_k, u_kln, u_kln[:, i, :], K, N_max, log_denominator)
                + f_k[i]
            )
            for i in range(K)
        ],
        dim=1,
    )
    return W_nk


def _regularized_solve(H, g, pinv_cutoff):
    if H.numel() == 0:
        return g.new_zeros(0)

    eigenvalues = torch.linalg.eigvalsh(H)
    num_discarded = int(torch.sum(torch.abs(eigenvalues) <= pinv_cutoff))
    if num_discarded > 0:
        warnings.warn(
            f"{num_discarded} near-singular direction(s) of the Hessian are discarded "
            f"(|eigenvalue| <= {pinv_cutoff:e}); some windows overlap poorly.",
            SingularHessianWarning,
        )

    return torch.linalg.pinv(H, atol=pinv_cutoff, hermitian=True) @ g


def _free_windows(K, reference_window):
    return torch.tensor(
        [k for k in range(K) if k != reference_window], dtype=torch.int64
    )


def _valid_mask(N_k, N_max):
    return torch.arange(N_max, dtype=N_k.dtype)[None, :] < N_k[:, None]


def _as_nested_series(u_kl):
    if isinstance(u_kl, dict):
        for key in u_kl.keys():
            if not isinstance(key, tuple) or len(key) != 2:
                raise ShapeError("keys of u_kl have to be (k, l) pairs of window labels.")
        row_labels = sorted({key[0] for key in u_kl.keys()})
        col_labels = sorted({key[1] for key in u_kl.keys()})
        if row_labels != col_labels:
            raise ShapeError("u_kl has to be square: row and column windows differ.")
        rows = []
        for k in row_labels:
            row = []
            for l in col_labels:
                if (k, l) not in u_kl:
                    raise ShapeError(f"u_kl has no entry for the pair ({k!r}, {l!r}).")
                row.append(_as_float64_array(u_kl[(k, l)]))
            rows.append(row)
        return rows

    return [
        [_as_float64_array(u_kl[k][l]) for l in range(len(u_kl[k]))]
        for k in range(len(u_kl))
    ]


def _as_float64_array(x):
    if isinstance(x, torch.Tensor):
        return x.detach().cpu().double().numpy()
    return np.array(x, dtype=np.float64)


def _check_positive_real(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} has to be a real number.")
    if not value > 0:
        raise ValueError(f"{name} has to be strictly greater than 0.")


def _check_non_negative_real(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} has to be a real number.")
    if not value >= 0:
        raise ValueError(f"{name} has to be greater than or equal to 0.")


def _check_non_negative_int(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} has to be an integer.")
    if value < 0:
        raise ValueError(f"{name} has to be greater than or equal to 0.")


def _check_positive_int(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} has to be an integer.")
    if value <= 0:
        raise ValueError(f"{name} has to be strictly greater than 0.")
