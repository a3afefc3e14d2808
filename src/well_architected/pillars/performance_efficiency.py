"""Performance Efficiency pillar."""

from ..rules import PillarDefinition, PillarQuestion, PillarRule, component_named
from ..schema import Severity

NAME = "Performance Efficiency"
DESCRIPTION = (
    "Focuses on using computing resources efficiently to meet requirements and "
    "maintain efficiency as demand changes."
)


def create_pillar() -> PillarDefinition:
    return PillarDefinition(
        name=NAME,
        description=DESCRIPTION,
        questions=(
            PillarQuestion(
                id="perf-1",
                question="How do you select your compute solution?",
                description="Compute resource selection and optimization",
                weight=2,
                best_practices=(
                    "Right-size compute instances",
                    "Use auto-scaling for variable workloads",
                    "Consider serverless options for appropriate workloads",
                    "Use AWS Compute Optimizer for recommendations",
                ),
                rules=(
                    PillarRule(
                        id="perf-1-1",
                        description="Architecture should include auto-scaling components",
                        predicate=component_named("Auto Scaling", "auto-scaling", "scaling"),
                        severity=Severity.MEDIUM,
                        recommendation=(
                            "Implement AWS Auto Scaling for compute resources. Use Amazon EC2 Auto "
                            "Scaling for EC2 instances and Application Auto Scaling for other AWS "
                            "services. Consider using AWS Compute Optimizer to get right-sizing "
                            "recommendations."
                        ),
                    ),
                ),
            ),
        ),
    )
