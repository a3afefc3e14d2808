"""Requirements Analyzer - stage 3 of the NLP pipeline.

Assembles extracted entities and recognized intents into a single structured
architecture record with an aggregate confidence.
"""

import re
from typing import Optional

from .config import AggregationConfig, get_config
from .schema import (
    ArchitecturePattern,
    ArchitectureRecord,
    BestPractice,
    Component,
    Constraint,
    ExtractedEntities,
    RecognizedIntents,
    Relationship,
    Requirement,
    ServiceRef,
    StructuredRequirements,
)


NAME_STOP_WORDS = {"architecture", "solution", "system", "platform", "application"}
DEFAULT_NAME = "AWS Architecture Solution"
DEFAULT_DESCRIPTION = "AWS architecture solution based on provided requirements."

SERVERLESS = "Serverless Architecture"
MICROSERVICES = "Microservices Architecture"
EVENT_DRIVEN = "Event-Driven Architecture"
CONTAINERIZED = "Containerized Architecture"
GENERAL = "General AWS Architecture"


def slugify(value: str) -> str:
    """Lower-case ``value`` and collapse runs of non-alphanumerics into '-'."""
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")


class RequirementsAnalyzer:
    """Converts entities and intents into an architecture record."""

    def __init__(self, aggregation: Optional[AggregationConfig] = None):
        self.aggregation = aggregation or get_config().aggregation

    def analyze(
        self,
        text: str,
        entities: ExtractedEntities,
        intents: RecognizedIntents,
    ) -> StructuredRequirements:
        """Build the architecture record for ``text``.

        Args:
            text: Original requirements text
            entities: Output of the entity extractor
            intents: Output of the intent recognizer

        Returns:
            The record together with its aggregate confidence
        """
        architecture = ArchitectureRecord(
            name=self.generate_name(text),
            description=self.generate_description(text),
            type=self.determine_type(entities, intents),
            components=self._map_components(entities),
            services=[
                ServiceRef(
                    service_name=s.name,
                    service_type=s.category,
                    description=s.description,
                    confidence=s.confidence,
                )
                for s in entities.services
            ],
            relationships=[
                Relationship(type=r.type, description=r.description, confidence=r.confidence)
                for r in entities.relationships
            ],
            requirements=[
                Requirement(type=r.type, value=r.value, description=r.description, confidence=r.confidence)
                for r in entities.requirements
            ],
            constraints=[
                Constraint(type=c.type, description=c.description, confidence=c.confidence)
                for c in intents.constraints
            ],
            patterns=[
                ArchitecturePattern(
                    name=p.pattern,
                    category=p.category,
                    services=list(p.services),
                    confidence=p.confidence,
                )
                for p in intents.architectural_patterns
            ],
            best_practices=[
                BestPractice(
                    type=p.type,
                    description=p.description,
                    is_best_practice=p.is_best_practice,
                    confidence=p.confidence,
                )
                for p in intents.best_practices
            ],
        )

        return StructuredRequirements(
            architecture=architecture,
            confidence=self.calculate_confidence(entities, intents),
            use_cases=list(intents.use_cases),
        )

    @staticmethod
    def generate_name(text: str) -> str:
        """First word longer than three characters that is not a stop word, titled."""
        words = [
            word for word in text.split(" ")
            if len(word) > 3 and word.lower() not in NAME_STOP_WORDS
        ]
        if words:
            first = words[0]
            return f"{first[0].upper()}{first[1:]} Architecture"
        return DEFAULT_NAME

    @staticmethod
    def generate_description(text: str) -> str:
        """First sentence longer than ten characters."""
        sentences = [s for s in text.split(".") if len(s.strip()) > 10]
        if sentences:
            return sentences[0].strip() + "."
        return DEFAULT_DESCRIPTION

    @staticmethod
    def determine_type(entities: ExtractedEntities, intents: RecognizedIntents) -> str:
        """Decide the architecture type from a fixed priority list.

        Recognized patterns are checked before services; a later rule only
        applies when every earlier one failed.
        """
        pattern_names = [p.pattern.lower() for p in intents.architectural_patterns]
        service_names = {s.name for s in entities.services}

        if any("serverless" in name for name in pattern_names):
            return SERVERLESS
        if any("microservices" in name for name in pattern_names):
            return MICROSERVICES
        if any("event-driven" in name for name in pattern_names):
            return EVENT_DRIVEN
        if "Lambda" in service_names:
            return SERVERLESS
        if "ECS" in service_names or "EKS" in service_names:
            return CONTAINERIZED
        return GENERAL

    def calculate_confidence(self, entities: ExtractedEntities, intents: RecognizedIntents) -> float:
        """Weighted mean of service and pattern confidences.

        An empty list contributes a mean of 0 (its sum over a denominator of 1).
        """
        services = entities.services
        patterns = intents.architectural_patterns
        entity_confidence = sum(s.confidence for s in services) / (len(services) or 1)
        intent_confidence = sum(p.confidence for p in patterns) / (len(patterns) or 1)
        confidence = (
            entity_confidence * self.aggregation.service_weight
            + intent_confidence * self.aggregation.pattern_weight
        )
        return min(1.0, max(0.0, confidence))

    @staticmethod
    def _map_components(entities: ExtractedEntities) -> list[Component]:
        """Catalog services first, then generic components, with stable ids."""
        components: list[Component] = []
        used_ids: set[str] = set()

        def component_id(name: str, component_type: str) -> str:
            candidate = f"comp-{slugify(name)}"
            if candidate in used_ids:
                candidate = f"{candidate}-{slugify(component_type)}"
            base, suffix = candidate, 2
            while candidate in used_ids:
                candidate = f"{base}-{suffix}"
                suffix += 1
            used_ids.add(candidate)
            return candidate

        for service in entities.services:
            components.append(Component(
                id=component_id(service.name, service.category),
                name=service.name,
                type=service.category,
                description=service.description,
                is_aws_service=True,
                confidence=service.confidence,
            ))

        for component in entities.components:
            components.append(Component(
                id=component_id(component.name, component.type),
                name=component.name,
                type=component.type,
                is_aws_service=False,
                confidence=component.confidence,
            ))

        return components
