"""Pydantic models for the requirements NLP pipeline.

Catalog entries are frozen and built once. Mentions, signals and architecture
records are created fresh per call and serialize to the camelCase contract
consumed by the diagram and documentation renderers.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ContractModel(BaseModel):
    """Base for records that cross the library boundary."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Catalog Entries
# =============================================================================


class ServiceEntry(BaseModel):
    """A known infrastructure service."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: str
    description: str
    keywords: tuple[str, ...] = ()


class PatternEntry(BaseModel):
    """A named architectural pattern."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    name: str
    category: str
    description: str
    services: tuple[str, ...] = ()
    use_cases: tuple[str, ...] = ()


# =============================================================================
# Extraction Results
# =============================================================================


class ServiceMention(_ContractModel):
    """A catalog service detected in the requirements text."""

    name: str
    category: str
    description: Optional[str] = None
    confidence: float = Field(..., ge=0, le=1)


class ComponentMention(_ContractModel):
    """A generic (non-catalog) component such as a database or a queue."""

    name: str
    type: str
    confidence: float = Field(..., ge=0, le=1)


class RelationshipMention(_ContractModel):
    """A relationship verb family found in the text."""

    type: str
    description: str
    confidence: float = Field(..., ge=0, le=1)


class RequirementMention(_ContractModel):
    """A non-functional requirement keyword family found in the text."""

    type: str
    value: str
    description: str
    confidence: float = Field(..., ge=0, le=1)


class ExtractedEntities(_ContractModel):
    """Everything the entity extractor found in one call."""

    services: list[ServiceMention] = Field(default_factory=list)
    components: list[ComponentMention] = Field(default_factory=list)
    relationships: list[RelationshipMention] = Field(default_factory=list)
    requirements: list[RequirementMention] = Field(default_factory=list)


class PatternSignal(_ContractModel):
    """A candidate architectural pattern."""

    pattern: str
    category: str
    confidence: float = Field(..., ge=0, le=1)
    services: list[str] = Field(default_factory=list)


class UseCaseSignal(_ContractModel):
    """A recognized use case (web application, api, iot, ...)."""

    type: str
    description: str
    confidence: float = Field(..., ge=0, le=1)


class ConstraintSignal(_ContractModel):
    """A stated constraint (budget, latency, compliance, ...)."""

    type: str
    description: str
    confidence: float = Field(..., ge=0, le=1)


class PracticeSignal(_ContractModel):
    """A best practice, or an anti-pattern when ``is_best_practice`` is False."""

    type: str
    description: str
    is_best_practice: bool
    confidence: float = Field(..., ge=0, le=1)


class RecognizedIntents(_ContractModel):
    """Everything the intent recognizer found in one call."""

    architectural_patterns: list[PatternSignal] = Field(default_factory=list)
    use_cases: list[UseCaseSignal] = Field(default_factory=list)
    constraints: list[ConstraintSignal] = Field(default_factory=list)
    best_practices: list[PracticeSignal] = Field(default_factory=list)


# =============================================================================
# Architecture Record
# =============================================================================


class Component(_ContractModel):
    """An architecture component, either a catalog service or a generic part."""

    id: str
    name: str
    type: str
    description: Optional[str] = None
    is_aws_service: bool = Field(False, alias="isAWSService")
    confidence: float = Field(..., ge=0, le=1)


class ServiceRef(_ContractModel):
    """A catalog service used by the architecture."""

    service_name: str
    service_type: str
    description: Optional[str] = None
    confidence: float = Field(..., ge=0, le=1)


class Relationship(_ContractModel):
    type: str
    description: str
    confidence: float = Field(..., ge=0, le=1)


class Requirement(_ContractModel):
    type: str
    value: str
    description: str
    confidence: float = Field(..., ge=0, le=1)


class Constraint(_ContractModel):
    type: str
    description: str
    confidence: float = Field(..., ge=0, le=1)


class ArchitecturePattern(_ContractModel):
    name: str
    category: str
    services: list[str] = Field(default_factory=list)
    confidence: float = Field(..., ge=0, le=1)


class BestPractice(_ContractModel):
    type: str
    description: str
    is_best_practice: bool
    confidence: float = Field(..., ge=0, le=1)


class ArchitectureRecord(_ContractModel):
    """Structured architecture assembled from requirements text."""

    name: str
    description: str
    type: str
    components: list[Component] = Field(default_factory=list)
    services: list[ServiceRef] = Field(default_factory=list)
    relationships: list[Relationship] = Field(default_factory=list)
    requirements: list[Requirement] = Field(default_factory=list)
    constraints: list[Constraint] = Field(default_factory=list)
    patterns: list[ArchitecturePattern] = Field(default_factory=list)
    best_practices: list[BestPractice] = Field(default_factory=list)

    def service_names(self) -> list[str]:
        """Names of the catalog services in declaration order."""
        return [s.service_name for s in self.services]


class StructuredRequirements(_ContractModel):
    """Analyzer output: the record plus its aggregate confidence."""

    architecture: ArchitectureRecord
    confidence: float = Field(..., ge=0, le=1)
    use_cases: list[UseCaseSignal] = Field(default_factory=list)


# =============================================================================
# Validation Block
# =============================================================================


class IssueSeverity(str, Enum):
    """Severity of a pipeline validation issue."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Issue(_ContractModel):
    """A single error, warning or suggestion raised by the error handler."""

    type: str
    message: str
    severity: IssueSeverity
    suggestion: str


class ValidationBlock(_ContractModel):
    """Errors, warnings and suggestions attached to a validated architecture."""

    errors: list[Issue] = Field(default_factory=list)
    warnings: list[Issue] = Field(default_factory=list)
    suggestions: list[Issue] = Field(default_factory=list)
    confidence: float = Field(0.0, ge=0, le=1)


class ValidatedArchitecture(_ContractModel):
    """Public pipeline output: the architecture with its validation block."""

    architecture: ArchitectureRecord
    validation: ValidationBlock = Field(default_factory=ValidationBlock)
    confidence: float = Field(..., ge=0, le=1)
    base_confidence: float = Field(..., ge=0, le=1)
    use_cases: list[UseCaseSignal] = Field(default_factory=list)


# =============================================================================
# Analyze Contract
# =============================================================================


class AnalysisComponent(_ContractModel):
    id: str
    name: str
    type: str
    description: str = ""
    is_aws_service: bool = Field(False, alias="isAWSService")


class AnalysisPattern(_ContractModel):
    name: str
    category: str
    services: list[str] = Field(default_factory=list)


class AnalysisEntities(_ContractModel):
    services: list[ServiceRef] = Field(default_factory=list)
    components: list[Component] = Field(default_factory=list)


class AnalysisIntents(_ContractModel):
    architectural_patterns: list[ArchitecturePattern] = Field(default_factory=list)
    use_cases: list[UseCaseSignal] = Field(default_factory=list)
    constraints: list[Constraint] = Field(default_factory=list)


class NLPAnalysis(_ContractModel):
    original_text: Optional[str] = None
    entities: AnalysisEntities = Field(default_factory=AnalysisEntities)
    intents: AnalysisIntents = Field(default_factory=AnalysisIntents)


class ArchitectureAnalysis(_ContractModel):
    """Result of the Analyze operation.

    A basic analysis (empty lists, confidence 0.3, ``nlp_analysis`` None) is a
    legitimate result, not an error.
    """

    components: list[AnalysisComponent] = Field(default_factory=list)
    relationships: list[Relationship] = Field(default_factory=list)
    patterns: list[AnalysisPattern] = Field(default_factory=list)
    requirements: list[Requirement] = Field(default_factory=list)
    constraints: list[Constraint] = Field(default_factory=list)
    best_practices: list[BestPractice] = Field(default_factory=list)
    validation: ValidationBlock = Field(default_factory=ValidationBlock)
    confidence: float = Field(..., ge=0, le=1)
    nlp_analysis: Optional[NLPAnalysis] = None

    def to_contract(self) -> dict[str, Any]:
        """Dump with contract keys; ``nlpAnalysis`` stays present even when None."""
        return self.model_dump(by_alias=True, mode="json")
