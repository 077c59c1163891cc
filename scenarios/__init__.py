"""
Scenario profiles and revenue noise models applied by the projection engine.
"""

from .base import RevenueNoiseModel
from .noise import NoRevenueNoise, UniformRevenueNoise, noise_model_for
from .scenario import (
    SCENARIO_PROFILES,
    ScenarioProfile,
    available_scenarios,
    get_scenario_profile,
    register_scenario,
)

__all__ = [
    "RevenueNoiseModel",
    "NoRevenueNoise",
    "UniformRevenueNoise",
    "noise_model_for",
    "SCENARIO_PROFILES",
    "ScenarioProfile",
    "available_scenarios",
    "get_scenario_profile",
    "register_scenario",
]
