"""Rule, question and pillar definitions for the Well-Architected validator.

Definitions are frozen and built once per validator. Predicates receive a
normalized ``ArchitectureInput`` so they never have to check for missing
fields.
"""

from dataclasses import dataclass, field
from typing import Callable

from .schema import ArchitectureInput, Severity


Predicate = Callable[[ArchitectureInput], bool]


@dataclass(frozen=True)
class PillarRule:
    """A boolean check with the recommendation emitted when it fails."""
    id: str
    description: str
    predicate: Predicate
    severity: Severity
    recommendation: str


@dataclass(frozen=True)
class PillarQuestion:
    """A weighted question answered by one or more rules."""
    id: str
    question: str
    description: str
    weight: int
    rules: tuple[PillarRule, ...]
    best_practices: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PillarDefinition:
    name: str
    description: str
    questions: tuple[PillarQuestion, ...]

    @property
    def total_weight(self) -> int:
        return sum(q.weight for q in self.questions)


def component_named(*needles: str) -> Predicate:
    """Passes when any component name contains one of ``needles`` (case-sensitive)."""
    def predicate(architecture: ArchitectureInput) -> bool:
        return any(
            needle in component.name
            for component in architecture.components
            for needle in needles
        )
    return predicate


def pattern_named(*needles: str) -> Predicate:
    """Passes when any pattern name contains one of ``needles`` (case-sensitive)."""
    def predicate(architecture: ArchitectureInput) -> bool:
        return any(
            needle in pattern.name
            for pattern in architecture.patterns
            for needle in needles
        )
    return predicate


def has_requirements(architecture: ArchitectureInput) -> bool:
    return len(architecture.requirements) > 0
