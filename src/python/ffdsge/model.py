import logging
import numpy as np
import pandas as pd
from collections import OrderedDict

from .errors import (ModelError, ParameterError, FixedParameterMutationError,
                     UnknownNameError, DuplicateNameError)
from .utils.bounds import get_transform, Untransformed

logger = logging.getLogger(__name__)

class Parameter:
    """
    A time-invariant model parameter.

    `value` is the bounded value in the units the parameter is reported and
    estimated in. `scaled_value` applies `scaling` and is what the model
    equations use. The transform maps `value` to and from the real line using
    `transform_bounds`; `value_bounds` is the support of the prior.
    """
    def __init__(self, name, value, value_bounds=None, transform_bounds=None,
                 transform="untransformed", prior=None, fixed=False, scaling=None,
                 description="", tex_label=""):
        self.name = name
        self.fixed = fixed
        self.prior = prior
        self.scaling = scaling
        self.description = description
        self.tex_label = tex_label

        if fixed and value_bounds is None:
            value_bounds = (value, value)
            transform_bounds = (value, value)
            transform = Untransformed()
        if value_bounds is None:
            value_bounds = (-np.inf, np.inf)
        if transform_bounds is None:
            transform_bounds = value_bounds

        self.value_bounds = tuple(value_bounds)
        self.transform_bounds = tuple(transform_bounds)
        self.transform = get_transform(transform)
        self._value = value

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, val):
        if self.fixed:
            raise FixedParameterMutationError(self.name)
        self._value = val

    @property
    def scaled_value(self):
        if self.scaling:
            return self.scaling(self._value)
        return self._value

    def to_unbounded(self):
        a, b = self.transform_bounds
        return self.transform.to_unbounded(self._value, a, b)

    def set_unbounded(self, u):
        a, b = self.transform_bounds
        self.value = self.transform.to_bounded(u, a, b)

    def __repr__(self):
        flag = ", fixed" if self.fixed else ""
        return f"Parameter({self.name!r}, {self._value}{flag})"

class SteadyStateParameter:
    """
    A steady-state value derived from the parameters. NaN until the first
    steady-state computation.
    """
    def __init__(self, name, value=np.nan, description="", tex_label=""):
        self.name = name
        self.value = value
        self.description = description
        self.tex_label = tex_label

    def __repr__(self):
        return f"SteadyStateParameter({self.name!r}, {self.value})"

class AbstractModel:
    spec = ""

    def __init__(self, seed=0):
        self.parameters = OrderedDict()
        self.steady_state = OrderedDict()
        self.keys = OrderedDict()

        self.endogenous_states = OrderedDict()
        self.exogenous_shocks = OrderedDict()
        self.expected_shocks = OrderedDict()
        self.equilibrium_conditions = OrderedDict()
        self.endogenous_states_augmented = OrderedDict()
        self.observables = OrderedDict()

        self.settings = OrderedDict()
        self.test_settings = OrderedDict()
        self.testing = False
        self.rng = np.random.default_rng(seed)

        self._closed = False

    # Model declaration

    def add_parameter(self, param):
        self._check_new_name(param.name)
        self.keys[param.name] = len(self.parameters)
        self.parameters[param.name] = param

    def add_steady_state(self, param):
        self._check_new_name(param.name)
        self.keys[param.name] = len(self.steady_state)
        self.steady_state[param.name] = param

    def add_setting(self, setting):
        self.settings[setting.key] = setting

    def add_test_setting(self, setting):
        self.test_settings[setting.key] = setting

    def _check_new_name(self, name):
        if self._closed:
            raise ModelError(f"Cannot declare '{name}' after the model has been constructed")
        if name in self.parameters or name in self.steady_state:
            raise DuplicateNameError(f"'{name}' is already declared in {self.spec}")

    def close(self):
        """Ends the declaration phase; only values may change afterwards."""
        self._closed = True

    # Settings

    def get_setting(self, key):
        if self.testing and key in self.test_settings:
            return self.test_settings[key].value
        if key in self.settings:
            return self.settings[key].value
        raise KeyError(f"Unknown setting '{key}'")

    def toggle_test_mode(self):
        self.testing = not self.testing
        logger.debug("%s test mode %s", self.spec, "on" if self.testing else "off")
        return self.testing

    @property
    def num_anticipated_shocks(self):
        return self.get_setting("num_anticipated_shocks")

    @property
    def num_anticipated_shocks_padding(self):
        return self.get_setting("num_anticipated_shocks_padding")

    @property
    def num_anticipated_lags(self):
        return self.get_setting("num_anticipated_lags")

    # Values

    def get(self, name):
        """Value of a parameter (unscaled) or of a steady-state value."""
        if name in self.parameters:
            return self.parameters[name].value
        if name in self.steady_state:
            return self.steady_state[name].value
        raise UnknownNameError(name, self.spec or "model")

    def scaled(self, name):
        """Value of a parameter as used in the model equations."""
        if name in self.parameters:
            return self.parameters[name].scaled_value
        return self.get(name)

    def set(self, name, value):
        if name in self.steady_state:
            raise ParameterError(f"'{name}' is a steady-state value; recompute the steady state instead")
        if name not in self.parameters:
            raise UnknownNameError(name, self.spec or "model")
        self.parameters[name].value = value

    def scaled_values(self):
        return {k: p.scaled_value for k, p in self.parameters.items()}

    def steady_state_series(self):
        return pd.Series(OrderedDict((k, p.value) for k, p in self.steady_state.items()),
                         name="steady_state", dtype=float)

    # Estimation interface

    def free_parameter_names(self):
        return [k for k, p in self.parameters.items() if not p.fixed]

    def to_unbounded_vector(self):
        return np.array([self.parameters[k].to_unbounded() for k in self.free_parameter_names()],
                        dtype=float)

    def from_unbounded_vector(self, values):
        """
        Sets the free parameters from a vector in the order of
        free_parameter_names(). The steady state is not recomputed.
        """
        keys = self.free_parameter_names()
        values = np.asarray(values, dtype=float)
        if values.shape != (len(keys),):
            raise ParameterError(f"Expected {len(keys)} free values, got shape {values.shape}")
        for key, u in zip(keys, values):
            self.parameters[key].set_unbounded(u)

    def prior(self):
        """
        Computes the log-prior of the free model parameters.
        """
        log_prior = 0.0
        for param in self.parameters.values():
            if not param.fixed and param.prior:
                lo, hi = param.value_bounds
                if not lo <= param.value <= hi:
                    return -np.inf
                log_prior += param.prior.logpdf(param.value)
        return log_prior

    # Index tables

    @property
    def n_states(self):
        return len(self.endogenous_states)

    @property
    def n_states_augmented(self):
        return self.n_states + len(self.endogenous_states_augmented)

    @property
    def n_shocks_exogenous(self):
        return len(self.exogenous_shocks)

    @property
    def n_shocks_expectational(self):
        return len(self.expected_shocks)

    @property
    def n_equilibrium_conditions(self):
        return len(self.equilibrium_conditions)

    @property
    def n_observables(self):
        return len(self.observables)

    def init_model_indices(self):
        raise NotImplementedError("Subclasses must implement init_model_indices")

    def steadystate(self):
        raise NotImplementedError("Subclasses must implement steadystate")

    def recompute_steady_state(self):
        """
        Recomputes every steady-state value from the current parameters.
        Must be called after any parameter change before steady-state values
        are read.
        """
        return self.steadystate()
