"""
Predefined parameter sets for the command line.

Each scenario holds the four model inputs of solve_sirs() plus a short
description. The "default" scenario matches the values the interactive chart
starts with.
"""

from typing import Any, Dict, List


PREDEFINED_SCENARIOS = {
    "default": {
        "description": "Seasonal respiratory infection with six months of immunity",
        "params": {
            "r0": 2.5,
            "gamma": 0.2,
            "immunity_duration": 180,
            "duration": 365,
        },
    },
    "short_immunity": {
        "description": "Immunity wanes within a month, recurring waves",
        "params": {
            "r0": 3.0,
            "gamma": 0.25,
            "immunity_duration": 30,
            "duration": 365,
        },
    },
    "permanent_immunity": {
        "description": "Lifelong immunity (classic SIR)",
        "params": {
            "r0": 2.5,
            "gamma": 0.2,
            "immunity_duration": float("inf"),
            "duration": 365,
        },
    },
    "sub_threshold": {
        "description": "R0 below 1, the infection dies out",
        "params": {
            "r0": 0.8,
            "gamma": 0.2,
            "immunity_duration": 180,
            "duration": 120,
        },
    },
}


def get_scenario(name: str) -> Dict[str, Any]:
    """
    Get the model inputs of a predefined scenario.

    Args:
        name: Scenario name (e.g., "default", "short_immunity").

    Returns:
        Dictionary with keys r0, gamma, immunity_duration, duration.

    Raises:
        ValueError: If scenario name is not recognized.
    """
    if name not in PREDEFINED_SCENARIOS:
        available = ", ".join(PREDEFINED_SCENARIOS.keys())
        raise ValueError(
            f"Unknown scenario: '{name}'. Available scenarios: {available}"
        )

    return PREDEFINED_SCENARIOS[name]["params"].copy()


def list_scenarios() -> List[str]:
    return list(PREDEFINED_SCENARIOS.keys())


def get_scenario_description(name: str) -> str:
    if name not in PREDEFINED_SCENARIOS:
        raise ValueError(f"Unknown scenario: '{name}'")

    return PREDEFINED_SCENARIOS[name]["description"]
