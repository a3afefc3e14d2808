"""Pydantic models for the Well-Architected validator.

Input is deliberately permissive: architectures arrive from user-supplied,
possibly malformed data, so every field defaults to its empty value and
``ArchitectureInput.from_any`` accepts almost anything. Output models
serialize to the camelCase report contract.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class Severity(str, Enum):
    """Severity of a pillar recommendation."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# =============================================================================
# Input Models
# =============================================================================


def _as_list(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _as_mapping(value: Any) -> Optional[dict]:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if isinstance(value, dict):
        return value
    return None


class ComponentInput(BaseModel):
    """A component as seen by the pillar rules."""
    name: str = ""
    type: str = ""
    description: str = ""
    is_aws_service: bool = False

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> dict:
        if isinstance(data, str):
            return {"name": data}
        mapping = _as_mapping(data)
        if mapping is None:
            return {}
        aws_flag = mapping.get("isAWSService", mapping.get("is_aws_service"))
        return {
            "name": str(mapping.get("name") or ""),
            "type": str(mapping.get("type") or ""),
            "description": str(mapping.get("description") or ""),
            "is_aws_service": bool(aws_flag),
        }


class PatternInput(BaseModel):
    """A recognized pattern as seen by the pillar rules."""
    name: str = ""
    category: str = ""
    services: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> dict:
        if isinstance(data, str):
            return {"name": data}
        mapping = _as_mapping(data)
        if mapping is None:
            return {}
        return {
            "name": str(mapping.get("name") or mapping.get("pattern") or ""),
            "category": str(mapping.get("category") or ""),
            "services": [str(s) for s in _as_list(mapping.get("services")) if s is not None],
        }


class ArchitectureInput(BaseModel):
    """Normalized architecture for rule evaluation.

    Missing or null fields become empty lists; non-list values are ignored.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    components: list[ComponentInput] = Field(default_factory=list)
    patterns: list[PatternInput] = Field(default_factory=list)
    relationships: list[Any] = Field(default_factory=list)
    requirements: list[Any] = Field(default_factory=list)
    constraints: list[Any] = Field(default_factory=list)
    best_practices: list[Any] = Field(default_factory=list)

    @field_validator(
        "components", "patterns", "relationships", "requirements", "constraints", "best_practices",
        mode="before",
    )
    @classmethod
    def _listify(cls, value: Any) -> list:
        return _as_list(value)

    @classmethod
    def from_any(cls, data: Any) -> "ArchitectureInput":
        """Coerce a record, analysis, dict, model or None into an input.

        A pipeline result that nests the record under ``architecture`` is
        unwrapped.
        """
        if isinstance(data, cls):
            return data
        mapping = _as_mapping(data)
        if mapping is None:
            return cls()
        nested = mapping.get("architecture")
        if "components" not in mapping and isinstance(nested, (dict, BaseModel)):
            mapping = _as_mapping(nested)
        return cls.model_validate(mapping)

    def aws_service_names(self) -> list[str]:
        """Names of components flagged as AWS services."""
        return [c.name for c in self.components if c.is_aws_service]


# =============================================================================
# Output Models
# =============================================================================


class _ReportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Recommendation(_ReportModel):
    """A finding produced by one failed pillar rule."""
    id: str
    title: str
    description: str
    severity: Severity
    pillar: str
    affected_components: list[str] = Field(default_factory=list)
    guidance: str
    references: list[str] = Field(default_factory=list)


class QuestionResult(_ReportModel):
    """Outcome of one weighted question in a pillar."""
    id: str
    question: str
    weight: int
    achieved_weight: int
    passed_rules: list[str] = Field(default_factory=list)
    failed_rules: list[str] = Field(default_factory=list)


class PillarResult(_ReportModel):
    """Score and recommendations for one pillar."""
    name: str
    description: str
    score: int = Field(..., ge=0, le=100)
    questions: list[QuestionResult] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)


class WellArchitectedReport(_ReportModel):
    """Complete validator output."""
    overall_score: int = Field(0, ge=0, le=100)
    pillars: list[PillarResult] = Field(default_factory=list)
    critical_issues: list[Recommendation] = Field(default_factory=list)
    high_risk_issues: list[Recommendation] = Field(default_factory=list)
    medium_risk_issues: list[Recommendation] = Field(default_factory=list)
    low_risk_issues: list[Recommendation] = Field(default_factory=list)
    recommendations_by_component: dict[str, list[Recommendation]] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def bucket(self, severity: Severity) -> list[Recommendation]:
        """The severity list a recommendation of ``severity`` belongs to."""
        return {
            Severity.CRITICAL: self.critical_issues,
            Severity.HIGH: self.high_risk_issues,
            Severity.MEDIUM: self.medium_risk_issues,
            Severity.LOW: self.low_risk_issues,
        }[severity]

    def pillar_score(self, name: str) -> Optional[int]:
        for pillar in self.pillars:
            if pillar.name == name:
                return pillar.score
        return None


class PillarScore(_ReportModel):
    name: str
    score: int
    recommendations_count: int


class ValidationSummary(_ReportModel):
    """Validation engine output: the report partitioned into issue lists."""
    issues: list[Recommendation] = Field(default_factory=list)
    warnings: list[Recommendation] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    well_architected_report: WellArchitectedReport
    detailed_report: str
    overall_score: int = Field(..., ge=0, le=100)
    pillar_scores: list[PillarScore] = Field(default_factory=list)
