"""Tests for the intent recognizer."""

import pytest

from architecture_nlp.intent_recognizer import IntentRecognizer


@pytest.fixture
def recognizer() -> IntentRecognizer:
    return IntentRecognizer()


class TestPatternRecognition:
    """Tests for pattern library and architecture keyword matching."""

    def test_pattern_name_match(self, recognizer):
        intents = recognizer.recognize("We want a static website")
        match = next(p for p in intents.architectural_patterns if p.pattern == "Static website")
        assert match.category == "Web Application Patterns"
        assert match.confidence == 0.85
        assert match.services == ["S3", "CloudFront", "Route 53"]

    def test_description_word_match_is_loose(self, recognizer):
        """A single shared description word is enough to match a pattern."""
        intents = recognizer.recognize("plan for growth")
        names = [p.pattern for p in intents.architectural_patterns]
        # "for" appears in the Event-driven processing description
        assert "Event-driven processing" in names

    def test_architecture_keyword(self, recognizer):
        intents = recognizer.recognize("Split it into microservices")
        keyword = [p for p in intents.architectural_patterns if p.category == "keyword-based"]
        assert [p.pattern for p in keyword] == ["microservices"]
        assert keyword[0].confidence == 0.75
        assert keyword[0].services == []

    def test_keyword_matching_is_case_insensitive(self, recognizer):
        intents = recognizer.recognize("A Serverless backend")
        assert "serverless" in [p.pattern for p in intents.architectural_patterns]

    def test_empty_text(self, recognizer):
        intents = recognizer.recognize("")
        assert intents.architectural_patterns == []
        assert intents.use_cases == []
        assert intents.constraints == []
        assert intents.best_practices == []


class TestSignalExtraction:
    """Tests for use cases, constraints and practice signals."""

    def test_use_cases(self, recognizer):
        intents = recognizer.recognize("A website with streaming dashboards")
        types = [u.type for u in intents.use_cases]
        assert "web-application" in types
        assert "real-time" in types
        assert all(u.confidence == 0.8 for u in intents.use_cases)

    @pytest.mark.parametrize("text,constraint_type", [
        ("We have a budget of $500 per month", "cost"),
        ("Latency < 100ms is expected", "performance"),
        ("uptime 99% is required", "availability"),
        ("We must comply with GDPR", "compliance"),
        ("There is a hard deadline", "timeline"),
    ])
    def test_constraints(self, recognizer, text, constraint_type):
        intents = recognizer.recognize(text)
        assert constraint_type in [c.type for c in intents.constraints]
        assert all(c.confidence == 0.85 for c in intents.constraints)

    def test_budget_constraint_description(self, recognizer):
        intents = recognizer.recognize("budget of $500")
        assert intents.constraints[0].description == "budget of $500"

    def test_best_practices_and_anti_patterns(self, recognizer):
        intents = recognizer.recognize("Follow least privilege and avoid a monolithic design")
        practices = {p.type: p for p in intents.best_practices}
        assert practices["security-best-practice"].is_best_practice is True
        assert practices["security-best-practice"].confidence == 0.9
        assert practices["tight-coupling"].is_best_practice is False
        assert practices["tight-coupling"].confidence == 0.85

    def test_best_practices_precede_anti_patterns(self, recognizer):
        intents = recognizer.recognize("single region deployment with cloudwatch")
        flags = [p.is_best_practice for p in intents.best_practices]
        assert flags == sorted(flags, reverse=True)
