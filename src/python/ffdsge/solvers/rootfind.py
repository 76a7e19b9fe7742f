import logging
import numpy as np
from scipy.optimize import newton, brentq
from ..errors import RootFindNonConvergence

logger = logging.getLogger(__name__)

class RootResult:
    converged = None

    def __init__(self, value):
        self.value = value

    def __float__(self):
        return float(self.value)

class Converged(RootResult):
    """A root that satisfied the residual tolerance."""
    converged = True

    def __init__(self, value, iterations, method):
        super().__init__(value)
        self.iterations = iterations
        self.method = method

    def __repr__(self):
        return f"Converged({self.value!r}, iterations={self.iterations}, method={self.method!r})"

class FellBackTo(RootResult):
    """No root was found; `value` is the fallback returned in its place."""
    converged = False

    def __init__(self, value, reason):
        super().__init__(value)
        self.reason = reason

    def __repr__(self):
        return f"FellBackTo({self.value!r}, reason={self.reason!r})"

def _check_residual(f, root, ftol, method):
    if not np.isfinite(root):
        raise RootFindNonConvergence(f"{method} returned a non-finite root")
    resid = f(root)
    if not abs(resid) <= ftol:
        raise RootFindNonConvergence(f"{method} stopped at {root} with residual {resid}")

def secant(f, x0, maxiter=50, xtol=1e-12, ftol=1e-8):
    root, info = newton(f, x0, tol=xtol, maxiter=maxiter, full_output=True)
    _check_residual(f, root, ftol, "secant")
    return Converged(float(root), info.iterations, "secant")

def bracketed(f, a, b, maxiter=100, xtol=1e-12, ftol=1e-8):
    root, info = brentq(f, a, b, xtol=xtol, maxiter=maxiter, full_output=True)
    _check_residual(f, root, ftol, "brentq")
    return Converged(float(root), info.iterations, "brentq")

def find_root(f, x0, bracket=(1e-5, 2.0), maxiter=50, xtol=1e-12, ftol=1e-8, fallback=None):
    """
    Finds a root of the scalar function f.

    Tries a secant iteration from x0, then Brent's method on `bracket`. Never
    raises on failure: if both fail, returns FellBackTo(fallback), where
    fallback defaults to x0. Errors raised by f (e.g. evaluations outside its
    domain) count as failures.

    Returns:
        Converged or FellBackTo
    """
    if fallback is None:
        fallback = x0
    reasons = []
    try:
        return secant(f, x0, maxiter=maxiter, xtol=xtol, ftol=ftol)
    except (RuntimeError, ArithmeticError, ValueError) as e:
        reasons.append(f"secant: {e}")

    if bracket is not None:
        try:
            return bracketed(f, bracket[0], bracket[1], maxiter=2 * maxiter, xtol=xtol, ftol=ftol)
        except (RuntimeError, ArithmeticError, ValueError) as e:
            reasons.append(f"brentq: {e}")

    logger.debug("Root-find from %s failed: %s", x0, "; ".join(reasons))
    return FellBackTo(fallback, "; ".join(reasons))
