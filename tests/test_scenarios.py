"""
Scenario registry and revenue noise models.
"""

import numpy as np
import pytest

from scenarios import noise_model_for
from scenarios.noise import NoRevenueNoise, UniformRevenueNoise
from scenarios.scenario import (
    SCENARIO_PROFILES,
    ScenarioProfile,
    available_scenarios,
    get_scenario_profile,
    register_scenario,
)


@pytest.fixture
def restore_registry():
    saved = dict(SCENARIO_PROFILES)
    yield
    SCENARIO_PROFILES.clear()
    SCENARIO_PROFILES.update(saved)


@pytest.mark.parametrize(
    "tag,boost,volatility",
    [
        ("startup", 0.05, 0.15),
        ("manufacturing", 0.02, 0.08),
        ("retail", 0.03, 0.10),
        ("generic", 0.0, 0.1),
    ],
)
def test_builtin_profiles(tag, boost, volatility):
    profile = get_scenario_profile(tag)
    assert profile.growth_rate_boost == boost
    assert profile.cost_volatility == volatility


def test_unknown_tag_falls_back_to_generic():
    assert get_scenario_profile("biotech") is SCENARIO_PROFILES["generic"]


def test_register_custom_scenario(restore_registry):
    register_scenario("saas", ScenarioProfile(growth_rate_boost=0.08, cost_volatility=0.2))
    assert get_scenario_profile("saas").growth_rate_boost == 0.08
    assert "saas" in available_scenarios()


def test_register_rejects_non_profile(restore_registry):
    with pytest.raises(TypeError):
        register_scenario("generic", {"growth_rate_boost": 0.1})
    assert "generic" in SCENARIO_PROFILES


def test_register_rejects_empty_tag(restore_registry):
    with pytest.raises(ValueError):
        register_scenario("", ScenarioProfile())


def test_no_noise_leaves_generator_untouched():
    rng = np.random.default_rng(0)
    state = rng.bit_generator.state
    assert NoRevenueNoise().perturb(123.0, volatility=0.5, rng=rng) == 123.0
    assert rng.bit_generator.state == state


def test_uniform_noise_stays_in_band():
    rng = np.random.default_rng(1)
    model = UniformRevenueNoise()
    draws = [model.perturb(1000.0, volatility=0.1, rng=rng) for _ in range(500)]
    assert min(draws) >= 900.0
    assert max(draws) <= 1100.0
    assert np.std(draws) > 0


def test_uniform_noise_floors_at_zero():
    rng = np.random.default_rng(2)
    draws = [UniformRevenueNoise().perturb(100.0, volatility=3.0, rng=rng) for _ in range(200)]
    assert min(draws) == 0.0


def test_noise_model_selection():
    assert isinstance(noise_model_for(True), UniformRevenueNoise)
    assert isinstance(noise_model_for(False), NoRevenueNoise)
