"""Reliability pillar.

Ensuring workloads perform their intended functions correctly and consistently.
"""

from ..rules import PillarDefinition, PillarQuestion, PillarRule, component_named
from ..schema import Severity

NAME = "Reliability"
DESCRIPTION = (
    "Focuses on ensuring workloads perform their intended functions correctly "
    "and consistently."
)


def create_pillar() -> PillarDefinition:
    return PillarDefinition(
        name=NAME,
        description=DESCRIPTION,
        questions=(
            PillarQuestion(
                id="rel-1",
                question="How do you plan for disaster recovery?",
                description="Disaster recovery planning and implementation",
                weight=3,
                best_practices=(
                    "Implement backup and restore procedures",
                    "Use multi-AZ deployments for critical components",
                    "Implement failover mechanisms",
                    "Test disaster recovery procedures regularly",
                ),
                rules=(
                    PillarRule(
                        id="rel-1-1",
                        description="Architecture should include backup components",
                        # S3 and EBS count as durable backup targets.
                        predicate=component_named("backup", "Backup", "S3", "EBS"),
                        severity=Severity.HIGH,
                        recommendation=(
                            "Implement AWS Backup for centralized backup management. Use Amazon S3 for "
                            "durable object storage and Amazon EBS snapshots for block storage backup. "
                            "Consider implementing cross-region replication for critical data."
                        ),
                    ),
                ),
            ),
        ),
    )
