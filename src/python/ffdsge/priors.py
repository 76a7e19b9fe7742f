import numpy as np
import scipy.stats as stats

class AbstractPrior:
    def logpdf(self, x):
        raise NotImplementedError

    def pdf(self, x):
        return np.exp(self.logpdf(x))

class Normal(AbstractPrior):
    """
    Normal distribution prior.
    params: mu (mean), sigma (std)
    """
    def __init__(self, mu, sigma):
        self.mu = mu
        self.sigma = sigma

    def logpdf(self, x):
        return stats.norm.logpdf(x, loc=self.mu, scale=self.sigma)

    def __repr__(self):
        return f"Normal(mu={self.mu}, sigma={self.sigma})"

class BetaAlt(AbstractPrior):
    """
    Beta distribution prior parameterized by its mean and standard deviation.
    params: mu (mean), sigma (std)
    """
    def __init__(self, mu, sigma):
        self.mu = mu
        self.sigma = sigma
        self.a = mu * (mu * (1 - mu) / sigma**2 - 1)
        self.b = self.a * (1 - mu) / mu

    def logpdf(self, x):
        return stats.beta.logpdf(x, self.a, self.b)

    def __repr__(self):
        return f"BetaAlt(mu={self.mu}, sigma={self.sigma})"

class GammaAlt(AbstractPrior):
    """
    Gamma distribution prior parameterized by its mean and standard deviation.
    params: mu (mean), sigma (std); shape k = mu^2/sigma^2, scale theta = sigma^2/mu
    """
    def __init__(self, mu, sigma):
        self.mu = mu
        self.sigma = sigma
        self.k = mu**2 / sigma**2
        self.theta = sigma**2 / mu

    def logpdf(self, x):
        return stats.gamma.logpdf(x, a=self.k, scale=self.theta)

    def __repr__(self):
        return f"GammaAlt(mu={self.mu}, sigma={self.sigma})"

class RootInverseGamma(AbstractPrior):
    """
    Prior on a standard deviation s whose square is inverse gamma:
        s^2 ~ IG(nu/2, nu*tau^2/2),   p(s) ∝ s^(-nu-1) exp(-nu tau^2 / (2 s^2))
    params: nu (degrees of freedom), tau (scale)
    """
    def __init__(self, nu, tau):
        self.nu = nu
        self.tau = tau

    def logpdf(self, x):
        x = np.asarray(x, dtype=float)
        with np.errstate(divide="ignore", invalid="ignore"):
            lp = np.log(2.0) + np.log(x) + stats.invgamma.logpdf(x**2, a=self.nu / 2,
                                                                 scale=self.nu * self.tau**2 / 2)
        return np.where(x > 0, lp, -np.inf)[()]

    def __repr__(self):
        return f"RootInverseGamma(nu={self.nu}, tau={self.tau})"
