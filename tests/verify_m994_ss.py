import logging
import numpy as np
from ffdsge.models.m994 import Model994

def verify_ss():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print("Initializing Model994...")
    m = Model994()

    print("\nSteady State Results:")
    for name, value in m.steady_state_series().items():
        print(f"{name:<20} {value: .12e}")

    print(f"\nsigma_omega_star root-find: {m.sigma_omega_solution!r}")

    assert np.isfinite(m.steady_state_series().values).all(), "non-finite steady state"
    assert m.get("ystar") > 0, "ystar should be positive"

    print("\nVerification successful (internal consistency)!")

if __name__ == "__main__":
    verify_ss()
