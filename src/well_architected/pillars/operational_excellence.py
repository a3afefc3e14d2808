"""Operational Excellence pillar.

Running and monitoring systems to deliver business value, and continually
improving processes and procedures.
"""

from ..rules import (
    PillarDefinition,
    PillarQuestion,
    PillarRule,
    component_named,
    has_requirements,
    pattern_named,
)
from ..schema import Severity

NAME = "Operational Excellence"
DESCRIPTION = (
    "Focuses on running and monitoring systems to deliver business value, "
    "and continually improving processes and procedures."
)


def create_pillar() -> PillarDefinition:
    return PillarDefinition(
        name=NAME,
        description=DESCRIPTION,
        questions=(
            PillarQuestion(
                id="opex-1",
                question="How do you understand your workload?",
                description="Understanding workload requirements, priorities, and success criteria",
                weight=2,
                best_practices=(
                    "Define clear business objectives and success criteria",
                    "Document workload requirements and constraints",
                    "Establish key performance indicators (KPIs)",
                ),
                rules=(
                    PillarRule(
                        id="opex-1-1",
                        description="Workload should have documented requirements",
                        predicate=has_requirements,
                        severity=Severity.MEDIUM,
                        recommendation=(
                            "Document clear business requirements and technical constraints for the "
                            "workload. Use AWS documentation templates to capture key information."
                        ),
                    ),
                ),
            ),
            PillarQuestion(
                id="opex-2",
                question="How do you structure your organization to support your business outcomes?",
                description="Organizational structure and team capabilities",
                weight=1,
                best_practices=(
                    "Align team structure with business outcomes",
                    "Define clear roles and responsibilities",
                    "Establish cross-functional collaboration",
                ),
                rules=(
                    PillarRule(
                        id="opex-2-1",
                        description="Team structure should be documented",
                        predicate=pattern_named("team", "organization", "collaboration"),
                        severity=Severity.LOW,
                        recommendation=(
                            "Document team structure, roles, and responsibilities. Consider using AWS "
                            "Organizational Units and IAM roles for clear separation of duties."
                        ),
                    ),
                ),
            ),
            PillarQuestion(
                id="opex-3",
                question="How do you design your workload so that you can understand its state?",
                description="Observability and monitoring capabilities",
                weight=3,
                best_practices=(
                    "Implement comprehensive logging",
                    "Set up monitoring and alerting",
                    "Use AWS CloudWatch for centralized monitoring",
                    "Implement distributed tracing for microservices",
                ),
                rules=(
                    PillarRule(
                        id="opex-3-1",
                        description="Architecture should include monitoring services",
                        predicate=component_named("CloudWatch", "monitoring", "logging"),
                        severity=Severity.HIGH,
                        recommendation=(
                            "Implement AWS CloudWatch for logging and monitoring. Consider CloudWatch "
                            "Alarms for critical metrics and CloudWatch Logs Insights for log analysis."
                        ),
                    ),
                    PillarRule(
                        id="opex-3-2",
                        description="Architecture should include alerting mechanisms",
                        predicate=component_named("SNS", "alert", "notification"),
                        severity=Severity.MEDIUM,
                        recommendation=(
                            "Set up alerting using Amazon SNS for notifications and AWS CloudWatch Alarms "
                            "for threshold-based alerts. Consider implementing multi-channel notifications."
                        ),
                    ),
                ),
            ),
        ),
    )
