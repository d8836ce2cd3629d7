import math
import numpy as np
from UmbrellaMBAR.utils import UmbrellaSamplingAnalyzer, harmonic_bias

## umbrella sampling of a free particle on a line with harmonic windows:
## window k samples x ~ Normal(x0_k, 1/sqrt(kappa_k)), so the exact free energy
## of window k is f_k = 0.5*log(kappa_k) + const
M = 10
x0 = np.linspace(-3.0, 3.0, M)
kappa = np.linspace(2.0, 6.0, M)
rng = np.random.default_rng(0)
num_conf = rng.integers(800, 1200, size = M)
cv = [rng.normal(x0[k], 1/math.sqrt(kappa[k]), size = num_conf[k]) for k in range(M)]
biasing_parameters = [np.array([kappa[k], x0[k]]) for k in range(M)]

analyzer = UmbrellaSamplingAnalyzer(cv, biasing_parameters, harmonic_bias, verbose = True)

F_ref = 0.5*np.log(kappa)
F_ref = F_ref - F_ref[0]
print("exact free energies    = ", F_ref)
print("estimated free energies = ", analyzer.F)

## free energy of a window that was never simulated: kappa = 4 centered at 0.5,
## reweighted from all windows
param_new = np.array([4.0, 0.5])
u_perturbed = [harmonic_bias(param_new, cv[k]) for k in range(M)]
results = analyzer.mbar.calculate_free_energies_of_perturbed_states(u_perturbed)
print("exact free energy of the new window     = ", 0.5*np.log(4.0) - 0.5*np.log(kappa[0]))
print("estimated free energy of the new window = ", results["F"][0])
