"""Scenarios for populating the local stores."""

from danji_care.scenarios.demo import DemoScenario

__all__ = ["DemoScenario"]
