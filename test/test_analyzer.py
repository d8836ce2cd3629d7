import pytest
from pytest import approx
import numpy as np
import math
from UmbrellaMBAR.utils import UmbrellaSamplingAnalyzer, harmonic_bias


def test_harmonic_bias():
    x = np.array([0.0, 1.0, 2.0])
    assert harmonic_bias(np.array([2.0, 1.0]), x) == approx([1.0, 0.0, 1.0])

    x2 = np.array([[0.0, 0.0], [1.0, 2.0]])
    assert harmonic_bias(np.array([2.0, 1.0, 4.0, 0.0]), x2) == approx([1.0, 8.0])

    ## the periodic distance between -3 and 3 is 2*pi - 6
    u = harmonic_bias(np.array([1.0, 3.0]), np.array([-3.0]), period=2 * math.pi)
    assert u == approx([0.5 * (2 * math.pi - 6.0) ** 2])


def test_UmbrellaSamplingAnalyzer():
    rng = np.random.default_rng(0)
    M = 6
    x0 = np.linspace(-2.0, 2.0, M)
    kappa = np.linspace(2.0, 5.0, M)
    cv = [rng.normal(x0[k], 1 / math.sqrt(kappa[k]), size=1000) for k in range(M)]
    biasing_parameters = [np.array([kappa[k], x0[k]]) for k in range(M)]

    analyzer = UmbrellaSamplingAnalyzer(cv, biasing_parameters, harmonic_bias)

    F_ref = 0.5 * np.log(kappa)
    F_ref = F_ref - F_ref[0]
    assert analyzer.F == approx(F_ref, abs=1e-1)
    assert analyzer.num_conf.tolist() == [1000] * M
    assert analyzer.u_kl[2][3] == approx(harmonic_bias(biasing_parameters[3], cv[2]))


def test_UmbrellaSamplingAnalyzer_arguments():
    cv = [np.zeros(3), np.ones(3)]
    params = [np.array([1.0, 0.0]), np.array([1.0, 1.0])]
    with pytest.raises(TypeError):
        UmbrellaSamplingAnalyzer(np.zeros(3), params)
    with pytest.raises(ValueError):
        UmbrellaSamplingAnalyzer(cv, params[:1])
    with pytest.raises(TypeError):
        UmbrellaSamplingAnalyzer(cv, params, biasing_energy_function=1.0)
    with pytest.raises(ValueError):
        UmbrellaSamplingAnalyzer([np.zeros(3), np.ones((3, 2))], params)
