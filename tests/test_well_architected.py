"""Tests for the Well-Architected validator and the validation engine."""

import math

import pytest

from architecture_nlp.pipeline import NLPPipeline
from well_architected.config import ReportConfig
from well_architected.engine import ValidationEngine
from well_architected.pillars import create_pillars
from well_architected.schema import ArchitectureInput, Severity
from well_architected.validator import WellArchitectedValidator, round_half_up


PILLAR_NAMES = [
    "Operational Excellence",
    "Security",
    "Reliability",
    "Performance Efficiency",
    "Cost Optimization",
    "Sustainability",
]

WELL_COVERED = {
    "components": [
        {"name": "CloudWatch"},
        {"name": "IAM"},
        {"name": "Auto Scaling"},
        {"name": "SNS"},
    ],
}

EC2_ONLY = {
    "components": [{"name": "EC2", "isAWSService": True}],
    "patterns": [],
    "requirements": [],
}


@pytest.fixture
def validator() -> WellArchitectedValidator:
    return WellArchitectedValidator()


class TestPillarDefinitions:
    """Tests for the pillar rule tables."""

    def test_six_pillars_in_order(self):
        assert [p.name for p in create_pillars()] == PILLAR_NAMES

    def test_question_weights(self):
        weights = {q.id: q.weight for p in create_pillars() for q in p.questions}
        assert weights == {
            "opex-1": 2, "opex-2": 1, "opex-3": 3,
            "sec-1": 3, "sec-2": 4,
            "rel-1": 3, "perf-1": 2, "cost-1": 2, "sust-1": 1,
        }

    def test_questions_carry_best_practices(self):
        for pillar in create_pillars():
            for question in pillar.questions:
                assert question.best_practices
                assert question.rules


class TestScoring:
    """Tests for pillar and overall scores."""

    def test_iam_rule_fails_as_critical(self, validator):
        report = validator.validate(EC2_ONLY)
        assert len(report.critical_issues) == 1
        issue = report.critical_issues[0]
        assert issue.severity == Severity.CRITICAL
        assert issue.pillar == "Security"
        assert issue.id == "security-sec-2-sec-2-1"
        assert issue.title == "Improve How do you manage identities for people and machines?"
        assert issue.affected_components == ["EC2"]

    def test_well_covered_scores_higher(self, validator):
        covered = validator.validate(WELL_COVERED)
        bare = validator.validate({"components": [{"name": "EC2"}]})
        assert covered.overall_score > bare.overall_score
        assert covered.overall_score == 43
        assert bare.overall_score == 0

    def test_pillar_scores(self, validator):
        report = validator.validate(WELL_COVERED)
        scores = {p.name: p.score for p in report.pillars}
        assert scores == {
            "Operational Excellence": 100,
            "Security": 57,
            "Reliability": 0,
            "Performance Efficiency": 100,
            "Cost Optimization": 0,
            "Sustainability": 0,
        }

    def test_multi_rule_question_accumulates(self, validator):
        """Each passing rule adds the full question weight; the score is clamped."""
        report = validator.validate({
            "components": [{"name": "CloudWatch"}, {"name": "SNS"}],
            "requirements": [{"type": "cost"}],
        })
        opex = report.pillars[0]
        opex3 = next(q for q in opex.questions if q.id == "opex-3")
        assert opex3.achieved_weight == 6
        assert opex3.passed_rules == ["opex-3-1", "opex-3-2"]
        assert opex.score == 100

    def test_overall_is_rounded_mean(self, validator):
        for architecture in (WELL_COVERED, EC2_ONLY, None, {"components": ["S3", "IAM"]}):
            report = validator.validate(architecture)
            mean = sum(p.score for p in report.pillars) / len(report.pillars)
            assert report.overall_score == math.floor(mean + 0.5)
            assert all(0 <= p.score <= 100 for p in report.pillars)

    def test_round_half_up(self):
        assert round_half_up(42.5) == 43
        assert round_half_up(0.5) == 1
        assert round_half_up(57.14) == 57

    def test_idempotent(self, validator):
        first = validator.validate(WELL_COVERED)
        second = validator.validate(WELL_COVERED)
        assert first.overall_score == second.overall_score
        assert [p.score for p in first.pillars] == [p.score for p in second.pillars]

    def test_unmet_critical_rule_never_increases_score(self, validator):
        with_iam = validator.validate(WELL_COVERED)
        without_iam = validator.validate({
            "components": [c for c in WELL_COVERED["components"] if c["name"] != "IAM"],
        })
        assert len(without_iam.critical_issues) == 1
        assert without_iam.overall_score <= with_iam.overall_score

    def test_pattern_rules(self, validator):
        report = validator.validate({"patterns": [{"name": "carbon aware scheduling"}, "team topology"]})
        assert report.pillar_score("Sustainability") == 100
        opex = report.pillars[0]
        assert "opex-2-1" in next(q for q in opex.questions if q.id == "opex-2").passed_rules


class TestRecommendations:
    """Tests for recommendation bucketing and indexing."""

    def test_empty_architecture_buckets(self, validator):
        report = validator.validate({})
        assert [r.id for r in report.critical_issues] == ["security-sec-2-sec-2-1"]
        assert len(report.high_risk_issues) == 3
        assert len(report.medium_risk_issues) == 4
        assert len(report.low_risk_issues) == 2
        assert report.overall_score == 0

    def test_fallback_affected_component(self, validator):
        report = validator.validate({"components": [{"name": "EC2"}]})
        assert list(report.recommendations_by_component) == ["Architecture"]
        total = sum(len(p.recommendations) for p in report.pillars)
        assert len(report.recommendations_by_component["Architecture"]) == total

    def test_indexed_by_every_aws_component(self, validator):
        report = validator.validate({"components": [
            {"name": "EC2", "isAWSService": True},
            {"name": "RDS", "isAWSService": True},
            {"name": "queue", "isAWSService": False},
        ]})
        assert set(report.recommendations_by_component) == {"EC2", "RDS"}
        assert report.recommendations_by_component["EC2"] == report.recommendations_by_component["RDS"]

    def test_reference_links(self, validator):
        report = validator.validate(EC2_ONLY)
        assert report.critical_issues[0].references == [
            "https://docs.aws.amazon.com/wellarchitected/latest/framework/security.html",
            "https://aws.amazon.com/architecture/well-architected/",
        ]

    def test_custom_report_config(self):
        validator = WellArchitectedValidator(report_config=ReportConfig(fallback_component="Workload"))
        report = validator.validate(None)
        assert list(report.recommendations_by_component) == ["Workload"]

    def test_guidance_is_rule_recommendation(self, validator):
        report = validator.validate({"components": ["IAM"]})
        rel = next(r for r in report.high_risk_issues if r.pillar == "Reliability")
        assert rel.guidance.startswith("Implement AWS Backup for centralized backup management.")
        assert rel.description == "Architecture should include backup components"


class TestMalformedInput:
    """The validator tolerates partial and malformed architectures."""

    @pytest.mark.parametrize("architecture", [
        None,
        {},
        {"components": None, "patterns": None, "requirements": None},
        {"components": "not a list", "patterns": 7},
        {"components": [None, 3, {"name": None}], "patterns": [{"category": "x"}]},
        "just a string",
        42,
    ])
    def test_never_raises(self, validator, architecture):
        report = validator.validate(architecture)
        assert len(report.pillars) == 6
        assert report.overall_score == 0

    def test_string_components(self, validator):
        report = validator.validate({"components": ["CloudWatch", "IAM"]})
        assert report.pillar_score("Security") == 57

    def test_pipeline_output_is_unwrapped(self, validator):
        validated = NLPPipeline().process("Monitoring with cloudwatch, alerts via sns, and iam roles")
        report = validator.validate(validated)
        assert report.pillar_score("Security") == 57
        assert "CloudWatch" in report.recommendations_by_component

    def test_input_coercion(self):
        data = ArchitectureInput.from_any({
            "components": [{"name": "S3", "isAWSService": True}, "IAM"],
            "bestPractices": None,
        })
        assert [c.name for c in data.components] == ["S3", "IAM"]
        assert data.aws_service_names() == ["S3"]
        assert data.best_practices == []


class TestDetailedReport:
    """Tests for the Markdown report."""

    def test_sections(self, validator):
        report = validator.validate(EC2_ONLY)
        text = validator.generate_detailed_report(report)
        assert text.startswith("# AWS Well-Architected Framework Validation Report\n")
        assert f"**Overall Score:** {report.overall_score}/100" in text
        assert "- **Critical Issues:** 1" in text
        assert "- **Security:** 0/100 (2 recommendations)" in text
        assert "## Critical Issues" in text
        assert "## High Risk Issues" in text
        assert "### EC2" in text
        assert "4. **Continuous Validation:**" in text

    def test_critical_section_omitted_when_empty(self, validator):
        report = validator.validate({"components": ["IAM"]})
        text = validator.generate_detailed_report(report)
        assert "## Critical Issues" not in text
        assert "## Recommendations by Component" in text


class TestValidationEngine:
    """Tests for the engine wrapper."""

    def test_partitions(self):
        summary = ValidationEngine().validate(None)
        report = summary.well_architected_report
        assert summary.issues == report.critical_issues + report.high_risk_issues
        assert summary.warnings == report.medium_risk_issues
        assert summary.recommendations == report.low_risk_issues
        assert len(summary.issues) == 4

    def test_pillar_scores(self):
        summary = ValidationEngine().validate(WELL_COVERED)
        assert summary.overall_score == 43
        assert [p.name for p in summary.pillar_scores] == PILLAR_NAMES
        security = summary.pillar_scores[1]
        assert (security.score, security.recommendations_count) == (57, 1)

    def test_contract_keys(self):
        data = ValidationEngine().validate(EC2_ONLY).model_dump(by_alias=True, mode="json")
        assert set(data) == {
            "issues", "warnings", "recommendations", "wellArchitectedReport",
            "detailedReport", "overallScore", "pillarScores",
        }
        assert data["pillarScores"][0]["recommendationsCount"] == 4
        assert data["issues"][0]["severity"] == "critical"
        assert "affectedComponents" in data["issues"][0]
        assert "recommendationsByComponent" in data["wellArchitectedReport"]

    def test_detailed_report_included(self):
        summary = ValidationEngine().validate(EC2_ONLY)
        assert summary.detailed_report.startswith("# AWS Well-Architected Framework Validation Report")
