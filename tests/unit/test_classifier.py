"""Unit tests for project type and feature detection."""

import pytest
from vibecoder.catalog import CategoryCatalog, CategoryDefinition, ProjectType, TechStack
from vibecoder.classifier import (
    FeatureExtractor,
    ProjectTypeDetector,
    classify,
    detect_project_type,
    extract_features,
)


class TestProjectTypeDetector:
    """Tests for ProjectTypeDetector."""

    @pytest.fixture
    def detector(self):
        return ProjectTypeDetector()

    @pytest.mark.parametrize("idea,expected", [
        ("Add items to a cart and order them", ProjectType.ECOMMERCE),
        ("An analytics tool for teams", ProjectType.SAAS),
        ("My personal portfolio site", ProjectType.PORTFOLIO),
        ("A blog about cooking", ProjectType.BLOG),
        ("A chat app for gamers", ProjectType.SOCIAL),
        ("An appointment tool for dentists", ProjectType.BOOKING),
        ("Online course for guitar", ProjectType.EDUCATION),
    ])
    def test_each_category(self, detector, idea, expected):
        assert detector.detect(idea) == expected

    def test_online_store(self, detector):
        assert detector.detect("I want to build an online store to sell shoes") == ProjectType.ECOMMERCE

    def test_case_insensitive(self, detector):
        assert detector.detect("AN ONLINE STORE FOR HATS") == ProjectType.ECOMMERCE

    def test_first_match_wins_over_later_category(self, detector):
        # "dashboard" is a saas keyword but ecommerce is declared first
        assert detector.detect("A dashboard for my online shop") == ProjectType.ECOMMERCE

    def test_saas_before_blog(self, detector):
        assert detector.detect("A blog with a subscription newsletter") == ProjectType.SAAS

    def test_substring_matching(self, detector):
        # "network" contains the portfolio keyword "work"
        assert detector.detect("A social network") == ProjectType.PORTFOLIO

    def test_no_match_is_general(self, detector):
        assert detector.detect("Build me a simple app") == ProjectType.GENERAL

    def test_empty_string_is_general(self, detector):
        assert detector.detect("") == ProjectType.GENERAL

    def test_custom_catalog(self):
        catalog = CategoryCatalog((
            CategoryDefinition(
                project_type=ProjectType.BLOG,
                keywords=("journal",),
                stack=TechStack(frontend=(), backend=(), features=()),
            ),
        ), default_type=ProjectType.BLOG)
        detector = ProjectTypeDetector(catalog)
        assert detector.detect("A travel journal") == ProjectType.BLOG
        assert detector.detect("An online store") == ProjectType.GENERAL

    def test_component_name(self, detector):
        assert detector.component_name == "project_type"


class TestFeatureExtractor:
    """Tests for FeatureExtractor."""

    @pytest.fixture
    def extractor(self):
        return FeatureExtractor()

    def test_multiple_features(self, extractor):
        result = extractor.detect("Users can login, search products and pay by card")
        assert result == ["authentication", "search", "payment"]

    def test_output_follows_table_order(self, extractor):
        result = extractor.detect("share on mobile with live notifications and login")
        assert result == [
            "authentication",
            "responsive design",
            "real-time updates",
            "social features",
        ]

    def test_feature_reported_once(self, extractor):
        result = extractor.detect("login, signup, user account and auth")
        assert result == ["authentication"]

    def test_no_features(self, extractor):
        assert extractor.detect("Build me a simple app") == []

    def test_empty_string(self, extractor):
        assert extractor.detect("") == []

    def test_idempotent(self, extractor):
        idea = "An admin dashboard to track metrics and share reports"
        assert extractor.detect(idea) == extractor.detect(idea)

    def test_case_insensitive(self, extractor):
        assert extractor.detect("LOGIN and SEARCH") == ["authentication", "search"]

    def test_custom_table(self):
        extractor = FeatureExtractor([("maps", ("map", "gps"))])
        assert extractor.detect("GPS tracking") == ["maps"]


class TestModuleFunctions:
    """Tests for the module-level helpers."""

    def test_detect_project_type(self):
        assert detect_project_type("I need a shop") == ProjectType.ECOMMERCE

    def test_extract_features(self):
        assert extract_features("with a search bar") == ["search"]

    def test_classify(self):
        result = classify("A shop where customers login")
        assert result.project_type == ProjectType.ECOMMERCE
        assert result.detected_features == ["authentication"]
