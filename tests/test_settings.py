import pytest

from ffdsge.models.m994 import Model994

def test_default_settings():
    m = Model994()
    assert m.get_setting("num_anticipated_shocks") == 6
    assert m.get_setting("num_anticipated_shocks_padding") == 20
    assert m.get_setting("num_anticipated_lags") == 24
    assert m.get_setting("rootfind_initial_guess") == 0.5
    assert m.num_anticipated_lags == 24

def test_test_mode_uses_test_settings():
    m = Model994()
    assert m.get_setting("n_mh_simulations") == 10000

    assert m.toggle_test_mode() is True
    assert m.get_setting("n_mh_simulations") == 100
    assert m.get_setting("n_mh_blocks") == 1
    # settings without a test value fall through
    assert m.get_setting("mh_cc") == 0.09

    assert m.toggle_test_mode() is False
    assert m.get_setting("n_mh_simulations") == 10000

def test_unknown_setting():
    m = Model994()
    with pytest.raises(KeyError):
        m.get_setting("n_particles")

def test_seeded_rng():
    a, b = Model994(seed=7), Model994(seed=7)
    assert a.rng.standard_normal() == b.rng.standard_normal()
