"""Well-Architected Validator.

Scores an architecture against the six pillars. Every question is a weighted
set of rules; a failing rule yields a recommendation tagged with the rule's
severity, a passing rule adds the question's weight to the pillar.
"""

import logging
import math
import re
from typing import Any, Optional

from pydantic import ValidationError

from .config import ReportConfig, get_config
from .pillars import create_pillars
from .rules import PillarDefinition, PillarQuestion, PillarRule
from .schema import (
    ArchitectureInput,
    PillarResult,
    QuestionResult,
    Recommendation,
    WellArchitectedReport,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def pillar_slug(name: str) -> str:
    return re.sub(r"\s+", "-", name.lower())


class WellArchitectedValidator:
    """Validates architectures against the Well-Architected pillars.

    Pillar definitions are built once at construction and never mutated, so a
    validator can be shared between callers.
    """

    def __init__(
        self,
        pillars: Optional[tuple[PillarDefinition, ...]] = None,
        report_config: Optional[ReportConfig] = None,
    ):
        self.pillars = pillars if pillars is not None else create_pillars()
        self.report_config = report_config or get_config().report

    def validate(self, architecture: Any) -> WellArchitectedReport:
        """Validate an architecture.

        Args:
            architecture: Analysis, record, dict or None. Missing fields are
                treated as empty.

        Returns:
            The full report with pillar scores and bucketed recommendations
        """
        logger.info("Validating architecture against %d Well-Architected pillars", len(self.pillars))
        normalized = self._normalize(architecture)
        affected = self.affected_components(normalized)

        report = WellArchitectedReport()
        for pillar in self.pillars:
            result = self.validate_pillar(pillar, normalized, affected)
            logger.debug("Pillar %s scored %d with %d recommendations",
                         result.name, result.score, len(result.recommendations))
            report.pillars.append(result)

            for recommendation in result.recommendations:
                report.bucket(recommendation.severity).append(recommendation)
                for component in recommendation.affected_components:
                    report.recommendations_by_component.setdefault(component, []).append(recommendation)

        report.overall_score = self.calculate_overall_score(report.pillars)
        return report

    def _normalize(self, architecture: Any) -> ArchitectureInput:
        try:
            return ArchitectureInput.from_any(architecture)
        except ValidationError as e:
            logger.warning("Architecture could not be read, validating as empty: %s", e)
            return ArchitectureInput()

    def validate_pillar(
        self,
        pillar: PillarDefinition,
        architecture: ArchitectureInput,
        affected: list[str],
    ) -> PillarResult:
        """Evaluate every rule of one pillar."""
        questions = []
        recommendations = []
        achieved = 0

        for question in pillar.questions:
            passed, failed = [], []
            for rule in question.rules:
                if rule.predicate(architecture):
                    passed.append(rule.id)
                else:
                    failed.append(rule.id)
                    recommendations.append(
                        self._build_recommendation(pillar, question, rule, affected)
                    )

            question_score = question.weight * len(passed)
            achieved += question_score
            questions.append(QuestionResult(
                id=question.id,
                question=question.question,
                weight=question.weight,
                achieved_weight=question_score,
                passed_rules=passed,
                failed_rules=failed,
            ))

        total = pillar.total_weight
        score = round_half_up(achieved / total * 100) if total > 0 else 0

        return PillarResult(
            name=pillar.name,
            description=pillar.description,
            # Multi-rule questions can push achieved weight past the total
            score=max(0, min(100, score)),
            questions=questions,
            recommendations=recommendations,
        )

    def _build_recommendation(
        self,
        pillar: PillarDefinition,
        question: PillarQuestion,
        rule: PillarRule,
        affected: list[str],
    ) -> Recommendation:
        return Recommendation(
            id=f"{pillar_slug(pillar.name)}-{question.id}-{rule.id}",
            title=f"Improve {question.question}",
            description=rule.description,
            severity=rule.severity,
            pillar=pillar.name,
            affected_components=list(affected),
            guidance=rule.recommendation,
            references=self.reference_links(pillar.name),
        )

    def affected_components(self, architecture: ArchitectureInput) -> list[str]:
        """AWS service components, or the fallback label when there are none."""
        names = architecture.aws_service_names()
        return names or [self.report_config.fallback_component]

    def reference_links(self, pillar_name: str) -> list[str]:
        cfg = self.report_config
        page = cfg.pillar_pages.get(pillar_name, cfg.default_page)
        return [f"{cfg.framework_base_url}{page}", cfg.overview_url]

    @staticmethod
    def calculate_overall_score(pillars: list[PillarResult]) -> int:
        if not pillars:
            return 0
        return round_half_up(sum(p.score for p in pillars) / len(pillars))

    def generate_detailed_report(self, report: WellArchitectedReport) -> str:
        """Render a report as Markdown."""
        lines = [
            "# AWS Well-Architected Framework Validation Report",
            "",
            f"**Generated:** {report.timestamp.isoformat()}",
            "",
            f"**Overall Score:** {report.overall_score}/100",
            "",
            "## Summary",
            "",
            f"- **Critical Issues:** {len(report.critical_issues)}",
            f"- **High Risk Issues:** {len(report.high_risk_issues)}",
            f"- **Medium Risk Issues:** {len(report.medium_risk_issues)}",
            f"- **Low Risk Issues:** {len(report.low_risk_issues)}",
            "",
            "## Pillar Scores",
            "",
        ]
        for pillar in report.pillars:
            lines.append(
                f"- **{pillar.name}:** {pillar.score}/100 "
                f"({len(pillar.recommendations)} recommendations)"
            )
        lines.append("")

        if report.critical_issues:
            lines.extend(["## Critical Issues", ""])
            for issue in report.critical_issues:
                lines.extend(self._issue_lines(issue))
                lines.append(f"- **References:** {', '.join(issue.references)}")
                lines.append("")

        if report.high_risk_issues:
            lines.extend(["## High Risk Issues", ""])
            for issue in report.high_risk_issues:
                lines.extend(self._issue_lines(issue))
                lines.append("")

        lines.extend(["## Recommendations by Component", ""])
        for component, recommendations in report.recommendations_by_component.items():
            lines.append(f"### {component}")
            for rec in recommendations:
                lines.append(f"- **{rec.title}** ({rec.severity.value}): {rec.description}")
            lines.append("")

        lines.extend([
            "## Improvement Suggestions",
            "",
            "1. **Address Critical Issues First:** Focus on resolving all critical issues "
            "before moving to lower severity items.",
            "2. **Pillar Improvement:** Consider focusing on pillars with the lowest scores first.",
            "3. **AWS Best Practices:** Review AWS Well-Architected Framework documentation "
            "for each pillar.",
            "4. **Continuous Validation:** Regularly validate your architecture as it evolves.",
        ])
        return "\n".join(lines) + "\n"

    @staticmethod
    def _issue_lines(issue: Recommendation) -> list[str]:
        return [
            f"### {issue.title}",
            f"- **Pillar:** {issue.pillar}",
            f"- **Severity:** {issue.severity.value}",
            f"- **Affected Components:** {', '.join(issue.affected_components)}",
            f"- **Description:** {issue.description}",
            f"- **Recommendation:** {issue.guidance}",
        ]
