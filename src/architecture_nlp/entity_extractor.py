"""Entity Extractor - stage 1 of the NLP pipeline.

Extracts AWS services, generic components, relationships and requirement
keywords from natural language text. Matching is plain substring and regex
matching against fixed vocabularies.
"""

import re
from typing import Optional

from .config import ConfidenceConfig, get_config
from .schema import (
    ComponentMention,
    ExtractedEntities,
    RelationshipMention,
    RequirementMention,
    ServiceEntry,
    ServiceMention,
)
from .service_catalog import ServiceCatalog, default_service_catalog


class EntityExtractor:
    """Extracts entity mentions from requirements text."""

    COMPONENT_PATTERNS = [
        (re.compile(r"(user|client|frontend|web app|mobile app)", re.IGNORECASE), "user-interface"),
        (re.compile(r"(database|data store|storage|repo)", re.IGNORECASE), "data-storage"),
        (re.compile(r"(api|endpoint|service|microservice)", re.IGNORECASE), "service"),
        (re.compile(r"(queue|message bus|event bus)", re.IGNORECASE), "messaging"),
        (re.compile(r"(cache|caching layer)", re.IGNORECASE), "cache"),
        (re.compile(r"(authentication|auth|identity provider)", re.IGNORECASE), "authentication"),
    ]

    RELATIONSHIP_PATTERNS = [
        (re.compile(r"(connects to|integrates with|uses|consumes|calls|triggers)", re.IGNORECASE), "uses"),
        (re.compile(r"(stores data in|writes to|saves to)", re.IGNORECASE), "stores-in"),
        (re.compile(r"(reads from|queries|accesses)", re.IGNORECASE), "reads-from"),
        (re.compile(r"(sends to|publishes to|emits)", re.IGNORECASE), "sends-to"),
        (re.compile(r"(receives from|subscribes to|listens to)", re.IGNORECASE), "receives-from"),
        (re.compile(r"(depends on|requires)", re.IGNORECASE), "depends-on"),
    ]

    # (pattern, requirement type, requirement value)
    REQUIREMENT_PATTERNS = [
        (re.compile(r"(high availability|ha|fault tolerant)", re.IGNORECASE), "availability", "high"),
        (re.compile(r"(low latency|fast response|real-time)", re.IGNORECASE), "performance", "low-latency"),
        (re.compile(r"(scalable|auto-scaling|elastic)", re.IGNORECASE), "scalability", "scalable"),
        (re.compile(r"(secure|encrypted|compliant)", re.IGNORECASE), "security", "secure"),
        (re.compile(r"(cost-effective|budget|low cost)", re.IGNORECASE), "cost", "cost-effective"),
        (re.compile(r"(backup|disaster recovery|dr)", re.IGNORECASE), "reliability", "backup"),
        (re.compile(r"(monitoring|logging|observability)", re.IGNORECASE), "monitoring", "monitored"),
    ]

    def __init__(
        self,
        catalog: Optional[ServiceCatalog] = None,
        confidences: Optional[ConfidenceConfig] = None,
    ):
        self.catalog = catalog or default_service_catalog()
        self.confidences = confidences or get_config().confidences

    def extract(self, text: str) -> ExtractedEntities:
        """Extract all entity mentions from ``text``.

        Services and components are matched against the lower-cased text;
        relationships and requirements against the original text.
        """
        normalized = text.lower()
        return ExtractedEntities(
            services=self._extract_services(normalized),
            components=self._extract_components(normalized),
            relationships=self._extract_relationships(text),
            requirements=self._extract_requirements(text),
        )

    def _extract_services(self, text: str) -> list[ServiceMention]:
        """Match catalog services by name or keyword, first match per name wins."""
        services: list[ServiceMention] = []
        seen: set[str] = set()

        for service in self.catalog.all_services():
            matched = (
                service.name.lower() == text
                or any(kw.lower() in text for kw in service.keywords)
            )
            if not matched or service.name in seen:
                continue
            seen.add(service.name)
            services.append(ServiceMention(
                name=service.name,
                category=service.category,
                description=service.description,
                confidence=self._service_confidence(text, service),
            ))

        return services

    def _service_confidence(self, text: str, service: ServiceEntry) -> float:
        """Confidence based on how clearly the service is mentioned."""
        if service.name.lower() in text:
            return self.confidences.service_name_match
        if any(kw.lower() in text for kw in service.keywords):
            return self.confidences.service_keyword_match
        return self.confidences.service_fallback

    def _extract_components(self, text: str) -> list[ComponentMention]:
        """Generic components, deduplicated by the matched substring."""
        components: list[ComponentMention] = []
        for pattern, component_type in self.COMPONENT_PATTERNS:
            match = pattern.search(text)
            if not match:
                continue
            name = match.group(0)
            if any(c.name == name for c in components):
                continue
            components.append(ComponentMention(
                name=name,
                type=component_type,
                confidence=self.confidences.component,
            ))
        return components

    def _extract_relationships(self, text: str) -> list[RelationshipMention]:
        """One mention per relationship family present in the text."""
        relationships = []
        for pattern, relationship_type in self.RELATIONSHIP_PATTERNS:
            match = pattern.search(text)
            if match:
                relationships.append(RelationshipMention(
                    type=relationship_type,
                    description=match.group(0),
                    confidence=self.confidences.relationship,
                ))
        return relationships

    def _extract_requirements(self, text: str) -> list[RequirementMention]:
        requirements = []
        for pattern, requirement_type, value in self.REQUIREMENT_PATTERNS:
            match = pattern.search(text)
            if match:
                requirements.append(RequirementMention(
                    type=requirement_type,
                    value=value,
                    description=match.group(0),
                    confidence=self.confidences.requirement,
                ))
        return requirements
