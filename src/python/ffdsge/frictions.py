"""
Functions of the financial frictions (BGG) block used to compute the
steady state. Entrepreneurs' idiosyncratic return ω is log-normal with
log-variance σ²; z is the standardized default threshold, so that
ω̄ = exp(σz - σ²/2) and F(ω̄) = Φ(z).

All functions are pure and take (z, sigma) or (z, sigma, spr), where spr is
the gross quarterly spread. Arguments outside the valid domain raise
SteadyStateDomainError instead of returning NaN.
"""
import numpy as np
from scipy.stats import norm
from .errors import SteadyStateDomainError

def _check(z, sigma, spr=None):
    if not np.all(np.isfinite(z)):
        raise SteadyStateDomainError(f"z must be finite, got {z}")
    if not np.all(np.isfinite(sigma)) or np.any(np.asarray(sigma) <= 0):
        raise SteadyStateDomainError(f"sigma must be finite and positive, got {sigma}")
    if spr is not None and (not np.all(np.isfinite(spr)) or np.any(np.asarray(spr) <= 0)):
        raise SteadyStateDomainError(f"spread must be finite and positive, got {spr}")

def _div(num, den, what):
    if np.any(np.asarray(den) == 0):
        raise SteadyStateDomainError(f"{what} is zero")
    return num / den

def ω_fn(z, sigma):
    _check(z, sigma)
    return np.exp(sigma * z - sigma**2 / 2)

def G_fn(z, sigma):
    _check(z, sigma)
    return norm.cdf(z - sigma)

def Γ_fn(z, sigma):
    return ω_fn(z, sigma) * (1 - norm.cdf(z)) + norm.cdf(z - sigma)

def dG_dω_fn(z, sigma):
    _check(z, sigma)
    return norm.pdf(z) / sigma

def d2G_dω2_fn(z, sigma):
    return _div(-z * norm.pdf(z), ω_fn(z, sigma) * sigma**2, "ω σ²")

def dΓ_dω_fn(z):
    return 1 - norm.cdf(z)

def d2Γ_dω2_fn(z, sigma):
    return _div(-norm.pdf(z), ω_fn(z, sigma) * sigma, "ω σ")

def dG_dσ_fn(z, sigma):
    _check(z, sigma)
    return -z * norm.pdf(z - sigma) / sigma

def d2G_dωdσ_fn(z, sigma):
    _check(z, sigma)
    return -norm.pdf(z) * (1 - z * (z - sigma)) / sigma**2

def dΓ_dσ_fn(z, sigma):
    _check(z, sigma)
    return -norm.pdf(z - sigma)

def d2Γ_dωdσ_fn(z, sigma):
    _check(z, sigma)
    return (z / sigma - 1) * norm.pdf(z)

def μ_fn(z, sigma, spr):
    """Bankruptcy (monitoring) cost share consistent with the spread."""
    _check(z, sigma, spr)
    num = (1 - 1/spr)
    den = _div(dG_dω_fn(z, sigma), dΓ_dω_fn(z), "dΓ/dω") * (1 - Γ_fn(z, sigma)) + G_fn(z, sigma)
    return _div(num, den, "denominator of mu")

def nk_fn(z, sigma, spr):
    """Net worth to capital ratio."""
    return 1 - (Γ_fn(z, sigma) - μ_fn(z, sigma, spr) * G_fn(z, sigma)) * spr

def ζ_bω_fn(z, sigma, spr):
    """Elasticity of the lender's break-even condition with respect to ω̄."""
    nk = nk_fn(z, sigma, spr)
    mu = μ_fn(z, sigma, spr)
    omega = ω_fn(z, sigma)
    gamma = Γ_fn(z, sigma)
    g = G_fn(z, sigma)
    dg = dG_dω_fn(z, sigma)
    dgamma = dΓ_dω_fn(z)
    d2g = d2G_dω2_fn(z, sigma)
    d2gamma = d2Γ_dω2_fn(z, sigma)

    gamma_mu_g_prime = dgamma - mu * dg
    num = omega * mu * nk * (d2gamma * dg - d2g * dgamma)
    den = gamma_mu_g_prime**2 * spr * (1 - gamma + dgamma * _div(gamma - mu * g, gamma_mu_g_prime,
                                                                 "dΓ/dω - μ dG/dω"))
    return _div(num, den, "denominator of zeta_bw")

def ζ_zω_fn(z, sigma, spr):
    """Elasticity of the default threshold with respect to ω̄."""
    mu = μ_fn(z, sigma, spr)
    return _div(ω_fn(z, sigma) * (dΓ_dω_fn(z) - mu * dG_dω_fn(z, sigma)),
                Γ_fn(z, sigma) - mu * G_fn(z, sigma), "Γ - μG")

def ζ_spb_fn(z, sigma, spr):
    """Elasticity of the spread with respect to leverage."""
    zetaratio = _div(ζ_bω_fn(z, sigma, spr), ζ_zω_fn(z, sigma, spr), "zeta_zw")
    nk = nk_fn(z, sigma, spr)
    return -_div(zetaratio, 1 - zetaratio, "1 - zeta_bw/zeta_zw") * _div(nk, 1 - nk, "1 - nk")
