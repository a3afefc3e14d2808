"""AWS Well-Architected scoring for architecture analyses."""

from .engine import ValidationEngine
from .schema import (
    ArchitectureInput,
    PillarResult,
    Recommendation,
    Severity,
    ValidationSummary,
    WellArchitectedReport,
)
from .validator import WellArchitectedValidator

__all__ = [
    "ArchitectureInput",
    "PillarResult",
    "Recommendation",
    "Severity",
    "ValidationEngine",
    "ValidationSummary",
    "WellArchitectedReport",
    "WellArchitectedValidator",
]
