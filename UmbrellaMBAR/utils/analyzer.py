import numpy as np
from ..umbrellambar import UmbrellaMBAR


def harmonic_bias(param, x, period=None):
    """Reduced harmonic umbrella bias 0.5*sum(kappa*(x - x0)**2).

    Parameters
    ----------
    param : 1D ndarray
        [kappa1, x0_1, kappa2, x0_2, ...], one pair per dimension of x.
        kappa has to be in units of kT.
    x : 1D ndarray of shape (N,) or 2D ndarray of shape (N, D)
        the collective variable.
    period : float, optional
        period of the collective variable, e.g. 2*pi for dihedrals.
    """
    param = np.reshape(np.asarray(param, dtype=np.float64), (-1, 2))
    kappa = param[:, 0]
    x0 = param[:, 1]

    x = np.asarray(x, dtype=np.float64)
    if x.ndim == 1:
        x = x[:, None]

    diff = np.abs(x - x0)
    if period is not None:
        diff = np.mod(diff, period)
        diff = np.minimum(diff, period - diff)
    return 0.5 * np.sum(kappa * diff**2, axis=1)


class UmbrellaSamplingAnalyzer:
    def __init__(
        self,
        cv,
        biasing_parameters,
        biasing_energy_function=harmonic_bias,
        **mbar_options,
    ):
        """ Initialize the UmbrellaSamplingAnalyzer class

        Parameters
        ----------
        cv : list or tuple of 1d or 2d ndarray.
            The collective variables biased in the umbrella sampling simulations.
            The length of cv is the number of windows/simulations in the umbrella sampling.
            cv[k] is the value of the collective variable for conformations sampled from the kth window,
            a 1d ndarray of shape (N_k, ) or a 2d ndarray of shape (N_k, D).
        biasing_parameters : list of 1d ndarray
            The biasing parameters used in the umbrella sampling simulations.
            biasing_parameters[k] is the biasing parameter used in the kth window.
        biasing_energy_function: a callable object
            A callable object that computes the biasing energy given the biasing parameters and the collective
            variable. It is called as biasing_energy_function(biasing_parameters[l], cv[k])
            and should return a ndarray of shape (N_k,). The returned energy needs to be unitless.
        **mbar_options
            passed on to UmbrellaMBAR.
        """

        if not isinstance(cv, (list, tuple)):
            raise TypeError("cv must be a list or tuple")
        cv = [np.asarray(v, dtype=np.float64) for v in cv]
        if len(cv) == 0:
            raise ValueError("cv must contain at least one window")
        if not all([v.ndim == cv[0].ndim for v in cv]) or cv[0].ndim not in (1, 2):
            raise ValueError("cv must be a list of 1d or 2d ndarray of same dimension")

        self.K = len(cv)
        self.cv = cv
        self.num_conf = np.array([v.shape[0] for v in cv], dtype=np.int64)

        if not isinstance(biasing_parameters, (list, tuple)):
            raise TypeError("biasing_parameters must be a list or tuple")
        if len(biasing_parameters) != self.K:
            raise ValueError(
                "biasing_parameters must have the same length as the number of windows"
            )
        self.biasing_parameters = [np.asarray(v) for v in biasing_parameters]

        if not callable(biasing_energy_function):
            raise TypeError("biasing_energy_function must be a callable object")
        self.biasing_energy_function = biasing_energy_function

        ## reduced energy of the samples of window k under the bias of window l
        self.u_kl = [
            [
                np.asarray(
                    self.biasing_energy_function(self.biasing_parameters[l], self.cv[k]),
                    dtype=np.float64,
                )
                for l in range(self.K)
            ]
            for k in range(self.K)
        ]

        self.mbar = UmbrellaMBAR(self.u_kl, **mbar_options)

    @property
    def F(self):
        """relative free energies of the umbrella windows"""
        return self.mbar.F
