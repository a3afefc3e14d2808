"""Tests for the requirements analyzer."""

import pytest

from architecture_nlp.requirements_analyzer import (
    CONTAINERIZED,
    DEFAULT_DESCRIPTION,
    DEFAULT_NAME,
    EVENT_DRIVEN,
    GENERAL,
    MICROSERVICES,
    SERVERLESS,
    RequirementsAnalyzer,
    slugify,
)
from architecture_nlp.schema import (
    ComponentMention,
    ExtractedEntities,
    PatternSignal,
    RecognizedIntents,
    ServiceMention,
)


def _services(*names, confidence=0.95):
    return [ServiceMention(name=n, category="compute", confidence=confidence) for n in names]


def _patterns(*names, confidence=0.85):
    return [PatternSignal(pattern=n, category="keyword-based", confidence=confidence) for n in names]


@pytest.fixture
def analyzer() -> RequirementsAnalyzer:
    return RequirementsAnalyzer()


class TestNameAndDescription:
    """Tests for name and description synthesis."""

    @pytest.mark.parametrize("text,expected", [
        ("Build a serverless web application", "Build Architecture"),
        ("the new platform for orders", "Orders Architecture"),
        ("an app", DEFAULT_NAME),
        ("", DEFAULT_NAME),
    ])
    def test_generate_name(self, text, expected):
        assert RequirementsAnalyzer.generate_name(text) == expected

    def test_generate_description_first_long_sentence(self):
        text = "Short. This is a longer sentence here. Another one follows"
        assert RequirementsAnalyzer.generate_description(text) == "This is a longer sentence here."

    def test_generate_description_fallback(self):
        assert RequirementsAnalyzer.generate_description("Tiny. Bits.") == DEFAULT_DESCRIPTION


class TestDetermineType:
    """Tests for the architecture type decision list."""

    @pytest.mark.parametrize("services,patterns,expected", [
        ([], ["serverless"], SERVERLESS),
        (["ECS"], ["microservices"], MICROSERVICES),
        ([], ["event-driven"], EVENT_DRIVEN),
        (["Lambda"], [], SERVERLESS),
        (["EKS"], [], CONTAINERIZED),
        (["EC2"], [], GENERAL),
        ([], [], GENERAL),
    ])
    def test_decision_list(self, services, patterns, expected):
        entities = ExtractedEntities(services=_services(*services))
        intents = RecognizedIntents(architectural_patterns=_patterns(*patterns))
        assert RequirementsAnalyzer.determine_type(entities, intents) == expected

    def test_patterns_take_priority_over_services(self):
        """A microservices pattern wins even when Lambda is present."""
        entities = ExtractedEntities(services=_services("Lambda"))
        intents = RecognizedIntents(architectural_patterns=_patterns("Containerized microservices"))
        assert RequirementsAnalyzer.determine_type(entities, intents) == MICROSERVICES

    def test_serverless_before_microservices(self):
        intents = RecognizedIntents(architectural_patterns=_patterns("microservices", "serverless"))
        assert RequirementsAnalyzer.determine_type(ExtractedEntities(), intents) == SERVERLESS


class TestConfidence:
    """Tests for the aggregate confidence."""

    def test_weighted_means(self, analyzer):
        entities = ExtractedEntities(services=_services("Lambda") + _services("S3", confidence=0.8))
        intents = RecognizedIntents(architectural_patterns=_patterns("serverless"))
        # 0.6 * 0.875 + 0.4 * 0.85
        assert analyzer.calculate_confidence(entities, intents) == pytest.approx(0.865)

    def test_empty_lists_contribute_zero(self, analyzer):
        assert analyzer.calculate_confidence(ExtractedEntities(), RecognizedIntents()) == 0.0

    def test_services_only(self, analyzer):
        entities = ExtractedEntities(services=_services("Lambda"))
        assert analyzer.calculate_confidence(entities, RecognizedIntents()) == pytest.approx(0.57)


class TestAnalyze:
    """Tests for the assembled architecture record."""

    def test_components_services_first(self, analyzer):
        entities = ExtractedEntities(
            services=_services("Lambda"),
            components=[ComponentMention(name="queue", type="messaging", confidence=0.8)],
        )
        result = analyzer.analyze("Lambda reading a queue", entities, RecognizedIntents())
        components = result.architecture.components
        assert [c.id for c in components] == ["comp-lambda", "comp-queue"]
        assert components[0].is_aws_service is True
        assert components[1].is_aws_service is False
        assert components[1].description is None

    def test_component_ids_are_deterministic(self, analyzer):
        entities = ExtractedEntities(
            services=[ServiceMention(name="S3", category="storage", confidence=0.95)],
            components=[
                ComponentMention(name="s3", type="data-storage", confidence=0.8),
                ComponentMention(name="s3", type="data-storage", confidence=0.8),
            ],
        )
        first = analyzer.analyze("s3", entities, RecognizedIntents())
        second = analyzer.analyze("s3", entities, RecognizedIntents())
        ids = [c.id for c in first.architecture.components]
        assert ids == ["comp-s3", "comp-s3-data-storage", "comp-s3-data-storage-2"]
        assert ids == [c.id for c in second.architecture.components]

    def test_record_carries_intents(self, analyzer):
        intents = RecognizedIntents(architectural_patterns=_patterns("serverless"))
        result = analyzer.analyze("A serverless thing", ExtractedEntities(), intents)
        assert result.architecture.patterns[0].name == "serverless"
        assert result.architecture.type == SERVERLESS

    def test_contract_aliases(self, analyzer):
        entities = ExtractedEntities(services=_services("Lambda"))
        result = analyzer.analyze("Lambda", entities, RecognizedIntents())
        data = result.architecture.model_dump(by_alias=True)
        assert "bestPractices" in data
        assert data["components"][0]["isAWSService"] is True
        assert data["services"][0]["serviceName"] == "Lambda"


class TestSlugify:
    def test_slugify(self):
        assert slugify("API Gateway") == "api-gateway"
        assert slugify("Lambda@Edge") == "lambda-edge"
        assert slugify("  Route 53 ") == "route-53"
