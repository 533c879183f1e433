"""
Unit tests for the Category Readiness skill.

Tests cover:
- Per-category completeness and caps
- Weighted overall score (pricing excluded)
- Compliance flags and missing-requirement suggestions
- snake_case / camelCase answer keys

Author: TenderCortex Team
"""

import pytest

from skills.category_readiness import (
    CATEGORY_SPECS,
    CATEGORY_WEIGHTS,
    CategoryReadinessCalculator,
    FlagSeverity,
    ReadinessCategory,
    RequirementPriority,
    calculate_category_readiness,
)


@pytest.fixture
def complete_answers() -> dict:
    """Respuestas estructuradas con todos los campos informados."""
    answers = {
        field: f"Answer for {field}"
        for spec in CATEGORY_SPECS
        for field, _ in spec.increments
    }
    answers["certifications"] = ["ISO 27001", "SOC 2 Type II"]
    answers["data_privacy"] = "Fully GDPR compliant with EU data residency"
    return answers


class TestCategoryScores:
    """Tests for per-category completeness."""

    def test_empty_answers_score_zero(self):
        breakdown = calculate_category_readiness({})

        assert breakdown.overall_score == 0
        assert [c.key for c in breakdown.categories] == list(ReadinessCategory)
        for category in breakdown.categories:
            assert category.completed_items == 0
            assert category.score == 0

    def test_none_is_treated_as_empty(self):
        assert calculate_category_readiness(None) == calculate_category_readiness({})

    def test_complete_answers_score_100(self, complete_answers):
        breakdown = calculate_category_readiness(complete_answers)

        assert breakdown.overall_score == 100
        for category in breakdown.categories:
            assert category.completed_items == category.total_items
            assert category.percentage == 100

    def test_partial_category(self):
        breakdown = calculate_category_readiness({"integrations": ["SAP"], "apis": "REST"})

        integration = breakdown.category(ReadinessCategory.INTEGRATION)
        assert integration.completed_items == 4
        assert integration.total_items == 6
        assert integration.score == 67
        assert integration.category == "Integration Requirements"

    def test_empty_values_do_not_count(self):
        breakdown = calculate_category_readiness({"architecture": "", "infrastructure": [], "scalability": None})
        assert breakdown.category(ReadinessCategory.TECHNICAL).completed_items == 0

    def test_camel_case_keys_are_recognised(self):
        breakdown = calculate_category_readiness({
            "executiveSummary": "We deliver",
            "useCases": ["Onboarding"],
            "responseTime": "1h",
        })

        assert breakdown.category(ReadinessCategory.FUNCTIONAL).completed_items == 3
        assert breakdown.category(ReadinessCategory.SLA).completed_items == 1

    def test_empty_snake_case_falls_back_to_camel_case(self):
        breakdown = calculate_category_readiness({"executive_summary": "", "executiveSummary": "x"})

        assert breakdown.category(ReadinessCategory.FUNCTIONAL).completed_items == 1
        assert "Executive Summary" not in [m.requirement for m in breakdown.missing_requirements]


class TestOverallScore:
    """Tests for the weighted overall score."""

    def test_weights_exclude_pricing(self):
        assert CATEGORY_WEIGHTS[ReadinessCategory.PRICING] == 0
        assert sum(CATEGORY_WEIGHTS.values()) == pytest.approx(1.0)

    def test_pricing_alone_does_not_move_overall(self):
        breakdown = calculate_category_readiness({
            "pricing": "100k",
            "pricing_model": "subscription",
            "payment_terms": "net 30",
            "discounts": "10%",
        })

        assert breakdown.category(ReadinessCategory.PRICING).score == 100
        assert breakdown.category(ReadinessCategory.PRICING).weight == 0
        assert breakdown.overall_score == 0

    def test_single_weighted_category(self):
        breakdown = calculate_category_readiness({
            "security": "Pen tested",
            "compliance": "ISO",
            "certifications": "SOC 2",
            "data_privacy": "GDPR",
            "audit_trails": True,
            "disaster_recovery": "Hot standby",
        })

        assert breakdown.category(ReadinessCategory.COMPLIANCE).score == 100
        assert breakdown.overall_score == 30


class TestComplianceFlags:
    """Tests for compliance flag rules."""

    def test_empty_answers_raise_all_flags(self):
        breakdown = calculate_category_readiness({})

        assert [f.flag_type for f in breakdown.compliance_flags] == [
            "Missing Certification",
            "Data Privacy",
            "Business Continuity",
            "SLA Commitment",
            "Pricing Transparency",
        ]
        assert len(breakdown.flags_with_severity(FlagSeverity.HIGH)) == 2
        assert len(breakdown.flags_with_severity(FlagSeverity.MEDIUM)) == 2
        assert len(breakdown.flags_with_severity(FlagSeverity.LOW)) == 1

    def test_complete_answers_raise_no_flags(self, complete_answers):
        assert calculate_category_readiness(complete_answers).compliance_flags == []

    def test_certification_mention_is_case_insensitive(self):
        breakdown = calculate_category_readiness({"certifications": ["iso 27001", "soc 2 type ii"]})

        flag_types = [f.flag_type for f in breakdown.compliance_flags]
        assert "Missing Certification" not in flag_types

    def test_certifications_without_soc2_are_flagged(self):
        breakdown = calculate_category_readiness({"certifications": ["ISO 27001"]})

        flag = breakdown.compliance_flags[0]
        assert flag.flag_type == "Missing Certification"
        assert flag.message == "SOC 2 Type II certification not provided"

    def test_sla_without_uptime_is_flagged(self):
        breakdown = calculate_category_readiness({"sla": "Business hours"})
        assert "SLA Commitment" in [f.flag_type for f in breakdown.compliance_flags]

    def test_sla_with_uptime_is_not_flagged(self):
        breakdown = calculate_category_readiness({"sla": "Gold", "uptime": "99.9%"})
        assert "SLA Commitment" not in [f.flag_type for f in breakdown.compliance_flags]


class TestMissingRequirements:
    """Tests for missing-requirement suggestions."""

    def test_empty_answers_list_every_rule(self):
        missing = calculate_category_readiness({}).missing_requirements

        assert len(missing) == 9
        assert missing[0].requirement == "Executive Summary"
        assert missing[0].category == "Functional Requirements"
        assert missing[0].severity == RequirementPriority.CRITICAL
        assert missing[-1].severity == RequirementPriority.OPTIONAL

    def test_answered_fields_are_not_listed(self, complete_answers):
        assert calculate_category_readiness(complete_answers).missing_requirements == []

    def test_suggested_fix_is_present(self):
        missing = calculate_category_readiness({"executive_summary": "x"}).missing_requirements

        names = [m.requirement for m in missing]
        assert "Executive Summary" not in names
        assert all(m.suggested_fix for m in missing)

    def test_calculator_class_matches_function(self, complete_answers):
        assert CategoryReadinessCalculator().calculate(complete_answers) == calculate_category_readiness(complete_answers)
