"""Sustainability pillar."""

from ..rules import PillarDefinition, PillarQuestion, PillarRule, pattern_named
from ..schema import Severity

NAME = "Sustainability"
DESCRIPTION = "Focuses on minimizing the environmental impacts of running cloud workloads."


def create_pillar() -> PillarDefinition:
    return PillarDefinition(
        name=NAME,
        description=DESCRIPTION,
        questions=(
            PillarQuestion(
                id="sust-1",
                question="How do you understand your impact?",
                description="Environmental impact awareness and measurement",
                weight=1,
                best_practices=(
                    "Measure and monitor resource utilization",
                    "Use AWS Customer Carbon Footprint Tool",
                    "Optimize resource usage to reduce environmental impact",
                    "Consider renewable energy options",
                ),
                rules=(
                    PillarRule(
                        id="sust-1-1",
                        description="Architecture should consider sustainability practices",
                        predicate=pattern_named("sustainability", "carbon", "energy efficiency"),
                        severity=Severity.LOW,
                        recommendation=(
                            "Implement sustainability practices by optimizing resource utilization, "
                            "using AWS Customer Carbon Footprint Tool to measure impact, and considering "
                            "renewable energy options where available."
                        ),
                    ),
                ),
            ),
        ),
    )
