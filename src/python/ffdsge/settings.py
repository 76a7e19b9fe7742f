class Setting:
    """
    A named flag or value that affects computation without changing the
    economic or mathematical setup of the model.
    """
    def __init__(self, key, value, description=""):
        self.key = key
        self.value = value
        self.description = description

    def __repr__(self):
        return f"Setting({self.key!r}, {self.value!r})"

def default_settings():
    return [
        # Anticipated policy shocks
        Setting("num_anticipated_shocks", 6, "Number of anticipated policy shocks"),
        Setting("num_anticipated_shocks_padding", 20, "Padding for anticipated policy shocks"),
        Setting("num_anticipated_lags", 24, "Number of periods back to incorporate zero bound expectations"),

        # Steady-state root-find for the idiosyncratic risk dispersion
        Setting("rootfind_initial_guess", 0.5, "Initial guess (and fallback) for sigma_omega_star"),
        Setting("rootfind_maxiter", 50, "Maximum secant iterations when solving for sigma_omega_star"),

        # Consumed by the estimator
        Setting("n_mh_simulations", 10000, "Number of draws per block in Metropolis-Hastings"),
        Setting("n_mh_blocks", 22, "Number of blocks for Metropolis-Hastings"),
        Setting("n_mh_burn", 2, "Number of blocks to discard as burn-in"),
        Setting("mh_thin", 5, "Metropolis-Hastings thinning step"),
        Setting("mh_cc", 0.09, "Jump size for Metropolis-Hastings proposals"),
    ]

def default_test_settings():
    return [
        Setting("n_mh_simulations", 100, "Number of draws per block in Metropolis-Hastings"),
        Setting("n_mh_blocks", 1, "Number of blocks for Metropolis-Hastings"),
        Setting("n_mh_burn", 0, "Number of blocks to discard as burn-in"),
        Setting("mh_thin", 1, "Metropolis-Hastings thinning step"),
    ]
