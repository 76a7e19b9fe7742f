import numpy as np
import pytest

from ffdsge.model import AbstractModel, Parameter, SteadyStateParameter
from ffdsge.models.m994 import Model994
from ffdsge.priors import Normal
from ffdsge.errors import (ModelError, ParameterError, FixedParameterMutationError,
                           UnknownNameError, DuplicateNameError)

@pytest.fixture
def model():
    return Model994()

def test_fixed_parameters_cannot_change(model):
    with pytest.raises(FixedParameterMutationError) as err:
        model.set("delta", 0.03)
    assert err.value.name == "delta"
    assert model.get("delta") == 0.025

    with pytest.raises(FixedParameterMutationError):
        model.parameters["sigma_rm10"].value = 0.2

def test_every_fixed_parameter_is_immutable(model):
    fixed = [p for p in model.parameters.values() if p.fixed]
    assert len(fixed) > 20
    for p in fixed:
        before = p.value
        with pytest.raises(FixedParameterMutationError):
            model.set(p.name, before + 1.0)
        with pytest.raises(FixedParameterMutationError):
            p.set_unbounded(0.5)
        assert model.get(p.name) == before

def test_fixed_parameters_keep_declared_metadata(model):
    fomega = model.parameters["Fomega"]
    assert fomega.transform.name == "square_root"
    assert fomega.transform_bounds == (1e-5, 0.99)
    assert fomega.prior.mu == 0.03
    assert model.parameters["gamma_star"].prior.mu == 0.99
    assert model.parameters["Upsilon"].value_bounds == (0., 10.)
    assert model.parameters["delta"].value_bounds == (0.025, 0.025)

def test_fixed_parameter_defaults():
    p = Parameter("x", 1.5, fixed=True)
    assert p.value_bounds == (1.5, 1.5)
    assert p.transform.name == "untransformed"

def test_get_and_set(model):
    model.set("alp", 0.2)
    assert model.get("alp") == 0.2
    assert np.isnan(SteadyStateParameter("x").value)

def test_scaling_is_separate_from_value(model):
    assert model.get("bet") == 0.1402
    assert model.scaled("bet") == pytest.approx(1 / (1 + 0.1402 / 100))
    assert model.scaled("pi_star") == pytest.approx(1.005)
    assert model.scaled("gam") == pytest.approx(0.003673)
    assert model.scaled("alp") == model.get("alp")

    model.set("spr", 2.0)
    assert model.get("spr") == 2.0
    assert model.scaled("spr") == pytest.approx(1.02**0.25)

def test_unknown_names(model):
    with pytest.raises(UnknownNameError):
        model.get("not_a_parameter")
    with pytest.raises(KeyError):
        model.set("not_a_parameter", 1.0)

def test_steady_state_values_are_read_only(model):
    with pytest.raises(ParameterError):
        model.set("zstar", 0.1)

def test_duplicate_names():
    m = AbstractModel()
    m.add_parameter(Parameter("a", 1.0))
    with pytest.raises(DuplicateNameError):
        m.add_parameter(Parameter("a", 2.0))
    with pytest.raises(DuplicateNameError):
        m.add_steady_state(SteadyStateParameter("a"))

def test_no_declarations_after_construction(model):
    with pytest.raises(ModelError):
        model.add_parameter(Parameter("extra", 1.0))
    with pytest.raises(ModelError):
        model.add_steady_state(SteadyStateParameter("extrastar"))

def test_anticipated_shock_parameters(model):
    for i in range(1, 21):
        assert f"sigma_rm{i}" in model.parameters
    free = model.free_parameter_names()
    assert "sigma_rm6" in free
    assert "sigma_rm7" not in free
    assert model.get("sigma_rm7") == 0.0

def test_free_parameters_exclude_fixed(model):
    free = model.free_parameter_names()
    assert all(not model.parameters[k].fixed for k in free)
    assert "Fomega" not in free
    assert "spr" in free

def test_unbounded_vector_round_trip(model):
    before = {k: model.get(k) for k in model.free_parameter_names()}
    u = model.to_unbounded_vector()
    assert u.shape == (len(before),)
    assert np.isfinite(u).all()

    model.from_unbounded_vector(u)
    for k, v in before.items():
        assert model.get(k) == pytest.approx(v, rel=1e-10, abs=1e-12)

def test_unbounded_vector_shape_checked(model):
    with pytest.raises(ParameterError):
        model.from_unbounded_vector(np.zeros(3))

def test_unbounded_vector_respects_bounds(model):
    n = len(model.free_parameter_names())
    model.from_unbounded_vector(np.full(n, 25.0))
    for k in model.free_parameter_names():
        p = model.parameters[k]
        if p.transform.name == "square_root":
            assert p.transform_bounds[0] <= p.value <= p.transform_bounds[1]
        elif p.transform.name == "exponential":
            assert p.value > p.transform_bounds[0]

def test_prior(model):
    lp = model.prior()
    assert np.isfinite(lp)

    model.set("alp", 1.5)
    assert model.prior() == -np.inf

def test_prior_only_counts_free_parameters():
    m = AbstractModel()
    m.add_parameter(Parameter("a", 0.0, prior=Normal(0.0, 1.0)))
    m.add_parameter(Parameter("b", 0.0, prior=Normal(0.0, 1.0), fixed=True))
    assert m.prior() == pytest.approx(-0.5 * np.log(2 * np.pi))
