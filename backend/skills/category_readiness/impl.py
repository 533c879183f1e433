"""
Category Readiness - Implementation

Presence-based completeness scoring of structured answers with:
- Six fixed categories with item denominators and increments
- Weighted overall score (pricing reported but not weighted)
- Rule-based compliance flags
- Missing-requirement suggestions with remediation text

Author: TenderCortex Team
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from .definition import (
    CategoryBreakdown,
    CategorySpec,
    ComplianceFlag,
    FlagSeverity,
    MissingRequirement,
    ReadinessBreakdown,
    ReadinessCategory,
    RequirementPriority,
)

logger = logging.getLogger(__name__)


CATEGORY_SPECS: List[CategorySpec] = [
    CategorySpec(
        key=ReadinessCategory.FUNCTIONAL,
        label="Functional Requirements",
        total_items=10,
        weight=0.25,
        increments=(
            ("executive_summary", 1),
            ("requirements_coverage", 3),
            ("features", 2),
            ("capabilities", 2),
            ("use_cases", 2),
        ),
    ),
    CategorySpec(
        key=ReadinessCategory.TECHNICAL,
        label="Technical Requirements",
        total_items=8,
        weight=0.25,
        increments=(
            ("architecture", 2),
            ("infrastructure", 2),
            ("scalability", 1),
            ("performance", 1),
            ("reliability", 1),
            ("deployment", 1),
        ),
    ),
    CategorySpec(
        key=ReadinessCategory.INTEGRATION,
        label="Integration Requirements",
        total_items=6,
        weight=0.10,
        increments=(
            ("integrations", 2),
            ("apis", 2),
            ("data_formats", 1),
            ("migration_plan", 1),
        ),
    ),
    CategorySpec(
        key=ReadinessCategory.COMPLIANCE,
        label="Compliance & Security",
        total_items=12,
        weight=0.30,
        increments=(
            ("security", 3),
            ("compliance", 3),
            ("certifications", 2),
            ("data_privacy", 2),
            ("audit_trails", 1),
            ("disaster_recovery", 1),
        ),
    ),
    CategorySpec(
        key=ReadinessCategory.SLA,
        label="Support & SLAs",
        total_items=6,
        weight=0.10,
        increments=(
            ("sla", 2),
            ("support", 2),
            ("uptime", 1),
            ("response_time", 1),
        ),
    ),
    CategorySpec(
        key=ReadinessCategory.PRICING,
        label="Pricing Structure",
        total_items=5,
        weight=0.0,  # reported, not part of the overall score
        increments=(
            ("pricing", 2),
            ("pricing_model", 1),
            ("payment_terms", 1),
            ("discounts", 1),
        ),
    ),
]

CATEGORY_WEIGHTS: Dict[ReadinessCategory, float] = {
    spec.key: spec.weight for spec in CATEGORY_SPECS
}

_LABELS: Dict[ReadinessCategory, str] = {spec.key: spec.label for spec in CATEGORY_SPECS}

REQUIRED_CERTIFICATION = "SOC 2"
REQUIRED_PRIVACY_STANDARD = "GDPR"

# (field, requirement, category, priority, suggested fix)
MISSING_REQUIREMENT_RULES = [
    (
        "executive_summary", "Executive Summary", ReadinessCategory.FUNCTIONAL,
        RequirementPriority.CRITICAL,
        "Provide a 2-3 paragraph executive summary of your solution",
    ),
    (
        "requirements_coverage", "Requirements Coverage Matrix", ReadinessCategory.FUNCTIONAL,
        RequirementPriority.CRITICAL,
        "Map each RFP requirement to your solution capabilities",
    ),
    (
        "architecture", "Solution Architecture", ReadinessCategory.TECHNICAL,
        RequirementPriority.IMPORTANT,
        "Provide architecture diagrams and technical specifications",
    ),
    (
        "scalability", "Scalability Plan", ReadinessCategory.TECHNICAL,
        RequirementPriority.IMPORTANT,
        "Describe how your solution scales with user growth",
    ),
    (
        "security", "Security Documentation", ReadinessCategory.COMPLIANCE,
        RequirementPriority.CRITICAL,
        "Provide security whitepaper and penetration test results",
    ),
    (
        "certifications", "Compliance Certifications", ReadinessCategory.COMPLIANCE,
        RequirementPriority.CRITICAL,
        "Upload SOC 2, ISO 27001, and other relevant certifications",
    ),
    (
        "integrations", "Integration Capabilities", ReadinessCategory.INTEGRATION,
        RequirementPriority.IMPORTANT,
        "List all supported integrations and APIs",
    ),
    (
        "sla", "Service Level Agreement", ReadinessCategory.SLA,
        RequirementPriority.IMPORTANT,
        "Provide detailed SLA commitments with uptime guarantees",
    ),
    (
        "pricing_model", "Pricing Model", ReadinessCategory.PRICING,
        RequirementPriority.OPTIONAL,
        "Describe the pricing model (subscription, per-seat, usage-based)",
    ),
]


def _camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _answer(data: Mapping[str, Any], key: str) -> Any:
    """Answer stored under the snake_case key or its camelCase twin."""
    return data.get(key) or data.get(_camel(key))


def _mentions(value: Any, needle: str) -> bool:
    """Case-insensitive mention check over a string or a list of strings."""
    if not value:
        return False
    needle = needle.lower()
    if isinstance(value, str):
        return needle in value.lower()
    if isinstance(value, (list, tuple, set)):
        return any(_mentions(item, needle) for item in value)
    if isinstance(value, Mapping):
        return any(_mentions(item, needle) for item in value.values())
    return needle in str(value).lower()


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


class CategoryReadinessCalculator:
    """
    Completeness scorer over a supplier's structured answers.

    Independent of the extraction-based readiness classifier: it only
    checks which answer fields are present.

    Usage:
        calculator = CategoryReadinessCalculator()
        breakdown = calculator.calculate({"executive_summary": "...", "sla": "99.9%"})
        print(breakdown.overall_score, len(breakdown.missing_requirements))
    """

    def calculate(self, answers: Optional[Mapping[str, Any]]) -> ReadinessBreakdown:
        data: Mapping[str, Any] = answers or {}

        categories = [self._score_category(spec, data) for spec in CATEGORY_SPECS]
        overall_score = self._weighted_score(categories)
        flags = self._compliance_flags(data)
        missing = self._missing_requirements(data)

        logger.info(
            f"Category readiness: overall {overall_score}/100, "
            f"{len(flags)} flag(s), {len(missing)} missing requirement(s)"
        )

        return ReadinessBreakdown(
            categories=categories,
            overall_score=overall_score,
            compliance_flags=flags,
            missing_requirements=missing,
        )

    def _score_category(self, spec: CategorySpec, data: Mapping[str, Any]) -> CategoryBreakdown:
        completed = sum(
            points for field, points in spec.increments if _answer(data, field)
        )
        completed = min(completed, spec.total_items)
        percentage = completed / spec.total_items * 100

        return CategoryBreakdown(
            category=spec.label,
            key=spec.key,
            completed_items=completed,
            total_items=spec.total_items,
            percentage=percentage,
            score=_round_half_up(percentage),
            weight=spec.weight,
        )

    def _weighted_score(self, categories: List[CategoryBreakdown]) -> int:
        weighted = [c for c in categories if c.weight > 0]
        total_weight = sum(c.weight for c in weighted)
        if total_weight <= 0:
            return 0
        weighted_sum = sum(c.score * c.weight for c in weighted)
        return max(0, min(100, _round_half_up(weighted_sum / total_weight)))

    def _compliance_flags(self, data: Mapping[str, Any]) -> List[ComplianceFlag]:
        flags: List[ComplianceFlag] = []

        if not _mentions(_answer(data, "certifications"), REQUIRED_CERTIFICATION):
            flags.append(ComplianceFlag(
                flag_type="Missing Certification",
                severity=FlagSeverity.HIGH,
                message=f"{REQUIRED_CERTIFICATION} Type II certification not provided",
                requirement="Security Compliance",
            ))

        if not _mentions(_answer(data, "data_privacy"), REQUIRED_PRIVACY_STANDARD):
            flags.append(ComplianceFlag(
                flag_type="Data Privacy",
                severity=FlagSeverity.HIGH,
                message=f"{REQUIRED_PRIVACY_STANDARD} compliance not documented",
                requirement="Data Privacy & Protection",
            ))

        if not _answer(data, "disaster_recovery"):
            flags.append(ComplianceFlag(
                flag_type="Business Continuity",
                severity=FlagSeverity.MEDIUM,
                message="Disaster recovery plan not provided",
                requirement="Business Continuity",
            ))

        if not _answer(data, "sla") or not _answer(data, "uptime"):
            flags.append(ComplianceFlag(
                flag_type="SLA Commitment",
                severity=FlagSeverity.MEDIUM,
                message="Uptime SLA not specified",
                requirement="Service Level Agreement",
            ))

        if not _answer(data, "pricing") or not _answer(data, "pricing_model"):
            flags.append(ComplianceFlag(
                flag_type="Pricing Transparency",
                severity=FlagSeverity.LOW,
                message="Pricing model not fully detailed",
                requirement="Pricing Structure",
            ))

        return flags

    def _missing_requirements(self, data: Mapping[str, Any]) -> List[MissingRequirement]:
        return [
            MissingRequirement(
                requirement=requirement,
                category=_LABELS[category],
                severity=priority,
                suggested_fix=fix,
            )
            for field, requirement, category, priority, fix in MISSING_REQUIREMENT_RULES
            if not _answer(data, field)
        ]


# Convenience function
def calculate_category_readiness(
    answers: Optional[Mapping[str, Any]],
) -> ReadinessBreakdown:
    """Calculate category readiness with default settings."""
    return CategoryReadinessCalculator().calculate(answers)
