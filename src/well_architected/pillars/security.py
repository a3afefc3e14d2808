"""Security pillar.

Protecting information and systems through risk assessment and mitigation.
"""

from ..rules import PillarDefinition, PillarQuestion, PillarRule, component_named
from ..schema import Severity

NAME = "Security"
DESCRIPTION = (
    "Focuses on protecting information and systems through risk assessment "
    "and mitigation strategies."
)


def create_pillar() -> PillarDefinition:
    return PillarDefinition(
        name=NAME,
        description=DESCRIPTION,
        questions=(
            PillarQuestion(
                id="sec-1",
                question="How do you securely operate your workload?",
                description="Security operations and incident response",
                weight=3,
                best_practices=(
                    "Implement security monitoring and alerting",
                    "Establish incident response procedures",
                    "Use AWS GuardDuty for threat detection",
                    "Implement AWS Security Hub for centralized security management",
                ),
                rules=(
                    PillarRule(
                        id="sec-1-1",
                        description="Architecture should include security monitoring",
                        predicate=component_named("GuardDuty", "Security Hub", "security monitoring"),
                        severity=Severity.HIGH,
                        recommendation=(
                            "Implement AWS GuardDuty for threat detection and AWS Security Hub for "
                            "centralized security management. Set up security monitoring and alerting "
                            "for critical security events."
                        ),
                    ),
                ),
            ),
            PillarQuestion(
                id="sec-2",
                question="How do you manage identities for people and machines?",
                description="Identity and access management",
                weight=4,
                best_practices=(
                    "Use AWS IAM for identity management",
                    "Implement least privilege access",
                    "Use temporary credentials where possible",
                    "Implement multi-factor authentication",
                ),
                rules=(
                    PillarRule(
                        id="sec-2-1",
                        description="Architecture should include IAM components",
                        predicate=component_named("IAM", "identity", "access management"),
                        severity=Severity.CRITICAL,
                        recommendation=(
                            "Implement AWS IAM for identity and access management. Use IAM roles, "
                            "policies, and groups to implement least privilege access control. Consider "
                            "using AWS IAM Access Analyzer to identify unused permissions."
                        ),
                    ),
                ),
            ),
        ),
    )
