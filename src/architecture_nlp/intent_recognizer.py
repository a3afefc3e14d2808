"""Intent Recognizer - stage 2 of the NLP pipeline.

Recognizes architectural patterns, use cases, constraints, best practices and
anti-patterns from requirements text.
"""

import re
from typing import Optional

from .config import ConfidenceConfig, get_config
from .patterns_library import PatternLibrary, default_pattern_library
from .schema import (
    ConstraintSignal,
    ExtractedEntities,
    PatternEntry,
    PatternSignal,
    PracticeSignal,
    RecognizedIntents,
    UseCaseSignal,
)


class IntentRecognizer:
    """Recognizes architectural intent from requirements text.

    Pattern-library matching is deliberately loose: a pattern matches when its
    name appears in the text or when any single word of its description does.
    That over-matches (short words such as "for" or "+" hit most inputs) and
    downstream confidence handling relies on it.
    """

    ARCHITECTURE_KEYWORDS = [
        "serverless",
        "microservices",
        "event-driven",
        "monolithic",
        "multi-tier",
        "hybrid",
        "data lake",
        "real-time",
    ]

    USE_CASE_PATTERNS = [
        (re.compile(r"(web application|website|frontend)", re.IGNORECASE), "web-application"),
        (re.compile(r"(api|rest api|graphql|endpoint)", re.IGNORECASE), "api"),
        (re.compile(r"(data processing|etl|analytics)", re.IGNORECASE), "data-processing"),
        (re.compile(r"(machine learning|ml|ai)", re.IGNORECASE), "machine-learning"),
        (re.compile(r"(iot|device|sensor)", re.IGNORECASE), "iot"),
        (re.compile(r"(mobile app|android|ios)", re.IGNORECASE), "mobile"),
        (re.compile(r"(batch processing|scheduled job)", re.IGNORECASE), "batch-processing"),
        (re.compile(r"(real-time|streaming|live)", re.IGNORECASE), "real-time"),
    ]

    CONSTRAINT_PATTERNS = [
        (re.compile(r"(budget of [$\d]+|cost limit|low cost)", re.IGNORECASE), "cost"),
        (re.compile(r"(latency < \d+ms|fast|low latency)", re.IGNORECASE), "performance"),
        (re.compile(r"(uptime \d+%|high availability|sla)", re.IGNORECASE), "availability"),
        (re.compile(r"(compliance with|must comply|regulation)", re.IGNORECASE), "compliance"),
        (re.compile(r"(security requirement|must be secure)", re.IGNORECASE), "security"),
        (re.compile(r"(scalability requirement|must scale)", re.IGNORECASE), "scalability"),
        (re.compile(r"(deadline|must be completed by)", re.IGNORECASE), "timeline"),
    ]

    BEST_PRACTICE_PATTERNS = [
        (re.compile(r"(well-architected|aws best practice)", re.IGNORECASE), "well-architected"),
        (re.compile(r"(least privilege|minimal permissions)", re.IGNORECASE), "security-best-practice"),
        (re.compile(r"(multi-az|high availability)", re.IGNORECASE), "availability-best-practice"),
        (re.compile(r"(infrastructure as code|iac|cloudformation)", re.IGNORECASE), "iac-best-practice"),
        (re.compile(r"(tagging strategy|resource tags)", re.IGNORECASE), "tagging-best-practice"),
        (re.compile(r"(monitoring|cloudwatch|logging)", re.IGNORECASE), "observability-best-practice"),
    ]

    ANTI_PATTERN_PATTERNS = [
        (re.compile(r"(over-provisioning|fixed capacity)", re.IGNORECASE), "over-provisioning"),
        (re.compile(r"(tight coupling|monolithic)", re.IGNORECASE), "tight-coupling"),
        (re.compile(r"(no backup|single region)", re.IGNORECASE), "no-backup"),
        (re.compile(r"(complexity without need)", re.IGNORECASE), "over-engineering"),
    ]

    def __init__(
        self,
        library: Optional[PatternLibrary] = None,
        confidences: Optional[ConfidenceConfig] = None,
    ):
        self.library = library or default_pattern_library()
        self.confidences = confidences or get_config().confidences

    def recognize(self, text: str, entities: Optional[ExtractedEntities] = None) -> RecognizedIntents:
        """Recognize all intent signals in ``text``.

        ``entities`` is accepted for pipeline symmetry; recognition only
        looks at the text.
        """
        practices = self._identify_best_practices(text)
        practices.extend(self._identify_anti_patterns(text))
        return RecognizedIntents(
            architectural_patterns=self._analyze_patterns(text),
            use_cases=self._extract_use_cases(text),
            constraints=self._extract_constraints(text),
            best_practices=practices,
        )

    def _analyze_patterns(self, text: str) -> list[PatternSignal]:
        normalized = text.lower()
        patterns = []

        for entry in self.library.all_patterns():
            if self._pattern_mentioned(normalized, entry):
                patterns.append(PatternSignal(
                    pattern=entry.name,
                    category=entry.category,
                    confidence=self.confidences.library_pattern,
                    services=list(entry.services),
                ))

        for keyword in self.ARCHITECTURE_KEYWORDS:
            if keyword in normalized:
                patterns.append(PatternSignal(
                    pattern=keyword,
                    category="keyword-based",
                    confidence=self.confidences.keyword_pattern,
                ))

        return patterns

    @staticmethod
    def _pattern_mentioned(normalized: str, entry: PatternEntry) -> bool:
        if entry.name.lower() in normalized:
            return True
        return any(word in normalized for word in entry.description.lower().split(" "))

    def _extract_use_cases(self, text: str) -> list[UseCaseSignal]:
        use_cases = []
        for pattern, use_case_type in self.USE_CASE_PATTERNS:
            match = pattern.search(text)
            if match:
                use_cases.append(UseCaseSignal(
                    type=use_case_type,
                    description=match.group(0),
                    confidence=self.confidences.use_case,
                ))
        return use_cases

    def _extract_constraints(self, text: str) -> list[ConstraintSignal]:
        constraints = []
        for pattern, constraint_type in self.CONSTRAINT_PATTERNS:
            match = pattern.search(text)
            if match:
                constraints.append(ConstraintSignal(
                    type=constraint_type,
                    description=match.group(0),
                    confidence=self.confidences.constraint,
                ))
        return constraints

    def _identify_best_practices(self, text: str) -> list[PracticeSignal]:
        return self._match_practices(text, self.BEST_PRACTICE_PATTERNS, True, self.confidences.best_practice)

    def _identify_anti_patterns(self, text: str) -> list[PracticeSignal]:
        return self._match_practices(text, self.ANTI_PATTERN_PATTERNS, False, self.confidences.anti_pattern)

    @staticmethod
    def _match_practices(text, table, is_best_practice, confidence) -> list[PracticeSignal]:
        practices = []
        for pattern, practice_type in table:
            match = pattern.search(text)
            if match:
                practices.append(PracticeSignal(
                    type=practice_type,
                    description=match.group(0),
                    is_best_practice=is_best_practice,
                    confidence=confidence,
                ))
        return practices
