"""Validation Engine - partitions a Well-Architected report into issue lists."""

import logging
from typing import Any, Optional

from .schema import PillarScore, ValidationSummary
from .validator import WellArchitectedValidator

logger = logging.getLogger(__name__)


class ValidationEngine:
    """Runs the Well-Architected validator and summarizes its report.

    Critical and high findings become ``issues``, medium findings become
    ``warnings`` and low findings become ``recommendations``.
    """

    def __init__(self, validator: Optional[WellArchitectedValidator] = None):
        self.validator = validator or WellArchitectedValidator()

    def validate(self, architecture: Any) -> ValidationSummary:
        logger.info("Validating architecture against best practices")
        report = self.validator.validate(architecture)

        return ValidationSummary(
            issues=report.critical_issues + report.high_risk_issues,
            warnings=list(report.medium_risk_issues),
            recommendations=list(report.low_risk_issues),
            well_architected_report=report,
            detailed_report=self.validator.generate_detailed_report(report),
            overall_score=report.overall_score,
            pillar_scores=[
                PillarScore(
                    name=pillar.name,
                    score=pillar.score,
                    recommendations_count=len(pillar.recommendations),
                )
                for pillar in report.pillars
            ],
        )
