"""Error Handler - stage 4 of the NLP pipeline.

Runs completeness, ambiguity, compatibility and best-practice coverage checks
over an assembled architecture and recomputes its confidence.
"""

from typing import Optional

from .config import ValidationPenaltyConfig, get_config
from .schema import (
    ArchitectureRecord,
    Issue,
    IssueSeverity,
    StructuredRequirements,
    ValidatedArchitecture,
    ValidationBlock,
)


VAGUE_TERMS = [
    "some",
    "few",
    "several",
    "many",
    "various",
    "good",
    "better",
    "best",
    "fast",
    "quick",
    "reliable",
    "stable",
    "efficient",
    "optimized",
]

# (services that must all be present, message, suggestion)
INCOMPATIBLE_SERVICES = [
    (
        ("EC2", "Lambda"),
        "Mixing EC2 and Lambda may indicate unclear architectural direction",
        "Consider whether you need traditional servers or serverless approach",
    ),
    (
        ("RDS", "DynamoDB"),
        "Using both RDS and DynamoDB may indicate unclear data storage needs",
        "Choose based on your data access patterns and consistency requirements",
    ),
]

SECURITY_SERVICES = {"IAM", "KMS", "WAF", "GuardDuty"}
MULTI_AZ_SERVICES = {"RDS", "EC2", "EKS"}


class ErrorHandler:
    """Validates an assembled architecture and adjusts its confidence."""

    def __init__(self, penalties: Optional[ValidationPenaltyConfig] = None):
        self.penalties = penalties or get_config().validation

    def validate(self, structured: StructuredRequirements) -> ValidatedArchitecture:
        """Run every check and return the architecture with its validation block.

        The checks only append issues; none of them reads another check's
        output. Confidence is recomputed from the final error and warning counts.
        """
        architecture = structured.architecture
        block = ValidationBlock(confidence=structured.confidence)

        self.check_completeness(architecture, block)
        self.check_ambiguity(architecture, block)
        self.check_service_compatibility(architecture, block)
        self.check_best_practices(architecture, block)

        adjusted = self.adjust_confidence(structured.confidence, block)
        block.confidence = adjusted

        return ValidatedArchitecture(
            architecture=architecture,
            validation=block,
            confidence=adjusted,
            base_confidence=structured.confidence,
            use_cases=list(structured.use_cases),
        )

    def check_completeness(self, architecture: ArchitectureRecord, block: ValidationBlock) -> None:
        if not architecture.components:
            block.errors.append(Issue(
                type="missing-components",
                message="No components detected in the architecture",
                severity=IssueSeverity.HIGH,
                suggestion="Please provide more specific requirements about the system components",
            ))

        if not architecture.services:
            block.errors.append(Issue(
                type="missing-services",
                message="No AWS services detected",
                severity=IssueSeverity.HIGH,
                suggestion="Mention specific AWS services or describe the type of application",
            ))

        if not architecture.requirements and not architecture.constraints:
            block.warnings.append(Issue(
                type="missing-requirements",
                message="No specific requirements or constraints detected",
                severity=IssueSeverity.MEDIUM,
                suggestion="Consider adding performance, security, or cost requirements",
            ))

    def check_ambiguity(self, architecture: ArchitectureRecord, block: ValidationBlock) -> None:
        """Flag vague terms anywhere in the serialized record, then conflicts."""
        serialized = architecture.model_dump_json(by_alias=True, exclude_none=True).lower()

        for term in VAGUE_TERMS:
            if term in serialized:
                block.warnings.append(Issue(
                    type="vague-requirement",
                    message=f'Vague term detected: "{term}"',
                    severity=IssueSeverity.LOW,
                    suggestion=f'Replace "{term}" with specific metrics or requirements',
                ))

        self.check_conflicting_requirements(architecture, block)

    def check_conflicting_requirements(self, architecture: ArchitectureRecord, block: ValidationBlock) -> None:
        requirements = architecture.requirements

        has_cost = any(r.type == "cost" and r.value == "cost-effective" for r in requirements)
        has_latency = any(r.type == "performance" and r.value == "low-latency" for r in requirements)
        if has_cost and has_latency:
            block.warnings.append(Issue(
                type="conflicting-requirements",
                message="Potential conflict between cost-effectiveness and low-latency requirements",
                severity=IssueSeverity.MEDIUM,
                suggestion="Consider trade-offs between cost and performance, or specify priorities",
            ))

        has_security = any(r.type == "security" for r in requirements)
        usability_constraints = [
            c for c in architecture.constraints
            if "user experience" in c.description.lower() or "ease of use" in c.description.lower()
        ]
        if has_security and usability_constraints:
            block.warnings.append(Issue(
                type="security-usability-tradeoff",
                message="Potential trade-off between security requirements and usability constraints",
                severity=IssueSeverity.MEDIUM,
                suggestion="Consider security best practices that maintain good user experience",
            ))

    def check_service_compatibility(self, architecture: ArchitectureRecord, block: ValidationBlock) -> None:
        services = set(architecture.service_names())
        for required, message, suggestion in INCOMPATIBLE_SERVICES:
            if all(name in services for name in required):
                block.warnings.append(Issue(
                    type="service-compatibility",
                    message=message,
                    severity=IssueSeverity.MEDIUM,
                    suggestion=suggestion,
                ))

    def check_best_practices(self, architecture: ArchitectureRecord, block: ValidationBlock) -> None:
        services = set(architecture.service_names())
        practices = architecture.best_practices

        has_security_service = bool(services & SECURITY_SERVICES)
        has_security_practice = any("security" in bp.type for bp in practices)
        if not has_security_service and not has_security_practice:
            block.suggestions.append(Issue(
                type="missing-security",
                message="No security services or best practices detected",
                severity=IssueSeverity.MEDIUM,
                suggestion="Consider adding IAM, KMS, or other security services for production workloads",
            ))

        has_stateful_service = bool(services & MULTI_AZ_SERVICES)
        has_availability_practice = any("availability" in bp.type for bp in practices)
        if has_stateful_service and not has_availability_practice:
            block.suggestions.append(Issue(
                type="missing-availability",
                message="Multi-AZ deployment not explicitly mentioned for stateful services",
                severity=IssueSeverity.MEDIUM,
                suggestion="Consider Multi-AZ deployment for RDS, EC2, or EKS for high availability",
            ))

    def adjust_confidence(self, confidence: float, block: ValidationBlock) -> float:
        """Penalize errors and warnings; never drop below the configured floor."""
        adjusted = (
            confidence
            - len(block.errors) * self.penalties.error_penalty
            - len(block.warnings) * self.penalties.warning_penalty
        )
        return min(1.0, max(self.penalties.confidence_floor, round(adjusted, 2)))
