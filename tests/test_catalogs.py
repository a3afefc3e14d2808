"""Tests for the service catalog and the pattern library."""

import pytest
from pydantic import ValidationError

from architecture_nlp.patterns_library import PatternLibrary, default_pattern_library
from architecture_nlp.service_catalog import ServiceCatalog, default_service_catalog


@pytest.fixture
def catalog() -> ServiceCatalog:
    return ServiceCatalog()


@pytest.fixture
def library() -> PatternLibrary:
    return PatternLibrary()


class TestServiceCatalog:
    """Tests for the static AWS service catalog."""

    def test_categories_in_catalog_order(self, catalog):
        assert catalog.categories() == [
            "compute", "storage", "database", "networking",
            "security", "management", "ai", "serverless",
        ]

    def test_get_catalog_shape(self, catalog):
        data = catalog.get_catalog()
        assert set(data) == set(catalog.categories())
        names = [s.name for s in data["compute"]["services"]]
        assert names[:2] == ["EC2", "Lambda"]

    def test_get_catalog_returns_fresh_mapping(self, catalog):
        """Mutating a returned mapping never changes the catalog."""
        data = catalog.get_catalog()
        data["compute"]["services"].clear()
        assert len(catalog.get_catalog()["compute"]["services"]) == 7

    def test_entries_are_frozen(self, catalog):
        entry = catalog.get_services_by_category("storage")[0]
        with pytest.raises(ValidationError):
            entry.name = "Changed"

    def test_lambda_listed_twice(self, catalog):
        lambdas = [s for s in catalog.all_services() if s.name == "Lambda"]
        assert [s.category for s in lambdas] == ["compute", "serverless"]

    @pytest.mark.parametrize("query,expected", [
        ("s3", "S3"),
        ("S3", "S3"),
        ("nosql", "DynamoDB"),
        ("Kubernetes", "EKS"),
        ("lambda", "Lambda"),
    ])
    def test_find_service(self, catalog, query, expected):
        assert catalog.find_service(query).name == expected

    def test_find_service_first_hit_wins(self, catalog):
        assert catalog.find_service("lambda").category == "compute"

    def test_keywords_keep_declared_order(self, catalog):
        ec2 = catalog.get_catalog()["compute"]["services"][0]
        assert ec2.keywords == ("ec2", "virtual machine", "vm", "instance")

    def test_find_service_is_exact(self, catalog):
        assert catalog.find_service("dynamo") is None

    def test_unknown_category_is_empty(self, catalog):
        assert catalog.get_services_by_category("quantum") == []

    def test_default_catalog_is_shared(self):
        assert default_service_catalog() is default_service_catalog()


class TestPatternLibrary:
    """Tests for the architectural pattern library."""

    def test_categories(self, library):
        assert library.categories() == [
            "serverless", "microservices", "webApplications",
            "dataProcessing", "hybrid", "security",
        ]

    def test_get_patterns_shape(self, library):
        data = library.get_patterns()
        assert data["serverless"]["name"] == "Serverless Patterns"
        assert len(data["serverless"]["patterns"]) == 4

    def test_pattern_category_is_display_name(self, library):
        pattern = library.get_patterns_by_category("dataProcessing")[0]
        assert pattern.name == "Batch processing"
        assert pattern.category == "Data Processing Patterns"

    def test_find_patterns_by_use_case(self, library):
        results = library.find_patterns_by_use_case("ETL")
        names = [r["pattern"] for r in results]
        assert names == ["Data processing pipeline", "Batch processing"]
        assert results[0]["category"] == "Serverless Patterns"
        assert results[0]["services"] == ["S3", "Lambda", "Redshift"]

    def test_find_patterns_by_use_case_no_match(self, library):
        assert library.find_patterns_by_use_case("mainframe") == []

    def test_unknown_category_is_empty(self, library):
        assert library.get_patterns_by_category("nope") == []

    def test_default_library_is_shared(self):
        assert default_pattern_library() is default_pattern_library()
