"""
Scenario registry — named industry profiles that tilt the projection.

growth_rate_boost is added to the strategy's growth rate every period.
cost_volatility scales the revenue shock in stochastic mode (the name is kept
from the stored scenario definitions even though it perturbs revenue).

Unknown tags resolve to "generic", which always exists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

logger = logging.getLogger(__name__)

GENERIC = "generic"


@dataclass(frozen=True)
class ScenarioProfile:
    growth_rate_boost: float = 0.0
    cost_volatility: float = 0.1


SCENARIO_PROFILES: Dict[str, ScenarioProfile] = {
    "startup": ScenarioProfile(growth_rate_boost=0.05, cost_volatility=0.15),
    "manufacturing": ScenarioProfile(growth_rate_boost=0.02, cost_volatility=0.08),
    "retail": ScenarioProfile(growth_rate_boost=0.03, cost_volatility=0.10),
    GENERIC: ScenarioProfile(growth_rate_boost=0.0, cost_volatility=0.1),
}


def get_scenario_profile(tag: str) -> ScenarioProfile:
    """Return the profile registered under tag, or the generic profile."""
    profile = SCENARIO_PROFILES.get(tag)
    if profile is None:
        logger.debug("Unknown scenario %r, falling back to %r", tag, GENERIC)
        return SCENARIO_PROFILES[GENERIC]
    return profile


def register_scenario(tag: str, profile: ScenarioProfile) -> None:
    """
    Add or replace a scenario profile.

    Registration is meant to happen at import/startup time; runs read the
    registry without locking.
    """
    if not tag:
        raise ValueError("Scenario tag must be a non-empty string.")
    if not isinstance(profile, ScenarioProfile):
        raise TypeError(
            f"Expected ScenarioProfile, got {type(profile).__name__}"
        )
    SCENARIO_PROFILES[tag] = profile


def available_scenarios() -> List[str]:
    return sorted(SCENARIO_PROFILES)
