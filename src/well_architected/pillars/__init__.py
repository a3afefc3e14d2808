"""The six Well-Architected pillars, in report order."""

from ..rules import PillarDefinition
from . import (
    cost_optimization,
    operational_excellence,
    performance_efficiency,
    reliability,
    security,
    sustainability,
)

PILLAR_MODULES = (
    operational_excellence,
    security,
    reliability,
    performance_efficiency,
    cost_optimization,
    sustainability,
)


def create_pillars() -> tuple[PillarDefinition, ...]:
    """Build all pillar definitions."""
    return tuple(module.create_pillar() for module in PILLAR_MODULES)
