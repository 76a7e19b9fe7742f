import numpy as np
import pytest

from ffdsge.frictions import *
from ffdsge.errors import SteadyStateDomainError

GRID = [(z, sigma, spr)
        for z in (-2.5, -1.9, -1.0)
        for sigma in (0.2, 0.5, 0.9)
        for spr in (1.002, 1.0043, 1.02)]

def z_from(omega, sigma):
    # standardized threshold for a given omega bar
    return (np.log(omega) + sigma**2 / 2) / sigma

@pytest.mark.parametrize("z,sigma,spr", GRID)
def test_lender_identity(z, sigma, spr):
    gamma, g, mu, nk = Γ_fn(z, sigma), G_fn(z, sigma), μ_fn(z, sigma, spr), nk_fn(z, sigma, spr)
    assert (gamma - mu * g) * spr == pytest.approx(1 - nk, rel=1e-12)
    assert 0 < g < gamma < 1
    assert ω_fn(z, sigma) > 0

@pytest.mark.parametrize("z,sigma", [(-2.0, 0.3), (-1.2, 0.6), (0.4, 0.8)])
def test_omega_derivatives(z, sigma):
    h = 1e-6
    omega = ω_fn(z, sigma)

    def at(w, s, fn):
        return fn(z_from(w, s), s)

    dG = (at(omega + h, sigma, G_fn) - at(omega - h, sigma, G_fn)) / (2 * h)
    dGamma = (at(omega + h, sigma, Γ_fn) - at(omega - h, sigma, Γ_fn)) / (2 * h)
    assert dG_dω_fn(z, sigma) == pytest.approx(dG, rel=1e-5)
    assert dΓ_dω_fn(z) == pytest.approx(dGamma, rel=1e-5)

    d2G = (at(omega + h, sigma, dG_dω_fn) - at(omega - h, sigma, dG_dω_fn)) / (2 * h)
    assert d2G_dω2_fn(z, sigma) == pytest.approx(d2G, rel=1e-4)
    d2Gamma = (dΓ_dω_fn(z_from(omega + h, sigma)) - dΓ_dω_fn(z_from(omega - h, sigma))) / (2 * h)
    assert d2Γ_dω2_fn(z, sigma) == pytest.approx(d2Gamma, rel=1e-4)

@pytest.mark.parametrize("z,sigma", [(-2.0, 0.3), (-1.2, 0.6), (0.4, 0.8)])
def test_sigma_derivatives_hold_omega_fixed(z, sigma):
    h = 1e-6
    omega = ω_fn(z, sigma)

    def at(s, fn):
        return fn(z_from(omega, s), s)

    dG = (at(sigma + h, G_fn) - at(sigma - h, G_fn)) / (2 * h)
    dGamma = (at(sigma + h, Γ_fn) - at(sigma - h, Γ_fn)) / (2 * h)
    assert dG_dσ_fn(z, sigma) == pytest.approx(dG, rel=1e-5)
    assert dΓ_dσ_fn(z, sigma) == pytest.approx(dGamma, rel=1e-5)

def test_zeta_spb_at_known_point():
    from scipy.stats import norm
    z = norm.ppf(0.03)
    assert ζ_spb_fn(z, 0.255204866742747, 1.7444) == pytest.approx(0.0559, abs=1e-9)

@pytest.mark.parametrize("sigma", [0.0, -0.1, np.nan, np.inf])
def test_invalid_sigma(sigma):
    with pytest.raises(SteadyStateDomainError):
        G_fn(-1.0, sigma)
    with pytest.raises(SteadyStateDomainError):
        ζ_spb_fn(-1.0, sigma, 1.004)

@pytest.mark.parametrize("spr", [0.0, -1.0, np.nan])
def test_invalid_spread(spr):
    with pytest.raises(SteadyStateDomainError):
        μ_fn(-1.9, 0.5, spr)
    with pytest.raises(SteadyStateDomainError):
        nk_fn(-1.9, 0.5, spr)

def test_invalid_threshold():
    with pytest.raises(SteadyStateDomainError):
        ω_fn(np.nan, 0.5)
    with pytest.raises(SteadyStateDomainError):
        dG_dσ_fn(np.inf, 0.5)

def test_domain_error_is_arithmetic_error():
    with pytest.raises(ArithmeticError):
        ω_fn(-1.0, 0.0)

def test_second_derivatives_reject_underflowed_omega():
    # omega bar underflows to 0.0 for large sigma|z|
    assert ω_fn(-1.88, 40.0) == 0.0
    with pytest.raises(SteadyStateDomainError):
        d2G_dω2_fn(-1.88, 40.0)
    with pytest.raises(SteadyStateDomainError):
        d2Γ_dω2_fn(-1.88, 40.0)
