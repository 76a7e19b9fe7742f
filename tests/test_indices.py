import pytest

from ffdsge.models.m994 import Model994
from ffdsge.utils.indices import build_indices, anticipated_names
from ffdsge.errors import DuplicateNameError

TABLES = ["endogenous_states", "exogenous_shocks", "expected_shocks",
          "equilibrium_conditions", "endogenous_states_augmented", "observables"]

@pytest.fixture(scope="module")
def model():
    return Model994()

def test_sizes(model):
    n_ant = model.num_anticipated_shocks
    assert n_ant == 6
    assert model.n_states == 60 + n_ant
    assert model.n_equilibrium_conditions == model.n_states
    assert model.n_shocks_exogenous == 18 + n_ant
    assert model.n_shocks_expectational == 13
    assert model.n_states_augmented == model.n_states + 16
    assert model.n_observables == 13 + n_ant

@pytest.mark.parametrize("table", TABLES)
def test_positions_are_contiguous(model, table):
    positions = list(getattr(model, table).values())
    start = model.n_states if table == "endogenous_states_augmented" else 0
    assert positions == list(range(start, start + len(positions)))

def test_anticipated_names_follow_literals(model):
    states = list(model.endogenous_states)
    assert states[:3] == ["y_t", "c_t", "i_t"]
    assert states[-6:] == ["rm_tl1", "rm_tl2", "rm_tl3", "rm_tl4", "rm_tl5", "rm_tl6"]
    assert list(model.exogenous_shocks)[-1] == "rm_shl6"
    assert list(model.equilibrium_conditions)[-6:] == anticipated_names("eq_rml", 6)
    assert list(model.observables)[-6:] == anticipated_names("R_n", 6)
    assert "rm_tl7" not in model.endogenous_states

def test_augmented_states_start_after_states(model):
    assert model.endogenous_states_augmented["y_t1"] == model.n_states
    assert model.endogenous_states_augmented["e_gdy_t1"] == model.n_states_augmented - 1

def test_rebuild_is_idempotent():
    m = Model994()
    before = {t: dict(getattr(m, t)) for t in TABLES}
    m.init_model_indices()
    m.init_model_indices()
    for t in TABLES:
        assert dict(getattr(m, t)) == before[t]

def test_anticipated_count_follows_setting():
    m = Model994()
    m.settings["num_anticipated_shocks"].value = 2
    m.init_model_indices()
    assert m.n_states == 62
    assert list(m.observables)[-2:] == ["R_n1", "R_n2"]

def test_build_indices():
    table = build_indices(["a", "b"], ["c1", "c2"], offset=3)
    assert list(table.items()) == [("a", 3), ("b", 4), ("c1", 5), ("c2", 6)]
    with pytest.raises(DuplicateNameError):
        build_indices(["a", "b", "a"])

def test_anticipated_names():
    assert anticipated_names("x", 0) == []
    assert anticipated_names("x", 3) == ["x1", "x2", "x3"]
