"""Cost Optimization pillar."""

from ..rules import PillarDefinition, PillarQuestion, PillarRule, component_named
from ..schema import Severity

NAME = "Cost Optimization"
DESCRIPTION = (
    "Focuses on avoiding unnecessary costs and maximizing business value from "
    "AWS services."
)


def create_pillar() -> PillarDefinition:
    return PillarDefinition(
        name=NAME,
        description=DESCRIPTION,
        questions=(
            PillarQuestion(
                id="cost-1",
                question="How do you understand and control your costs?",
                description="Cost awareness and control mechanisms",
                weight=2,
                best_practices=(
                    "Implement cost allocation tags",
                    "Set up budget alerts",
                    "Use AWS Cost Explorer for cost analysis",
                    "Implement cost optimization recommendations",
                ),
                rules=(
                    PillarRule(
                        id="cost-1-1",
                        description="Architecture should include cost monitoring components",
                        predicate=component_named("Cost Explorer", "budget", "cost monitoring"),
                        severity=Severity.MEDIUM,
                        recommendation=(
                            "Implement AWS Cost Explorer for cost analysis and AWS Budgets for cost "
                            "monitoring and alerts. Use cost allocation tags to track costs by project, "
                            "department, or environment."
                        ),
                    ),
                ),
            ),
        ),
    )
