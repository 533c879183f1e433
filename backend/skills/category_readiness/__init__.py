"""
Category Readiness Skill

Completeness scoring of a supplier's structured answers by category,
with compliance flags and missing-requirement suggestions.
"""

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

from .impl import (
    CategoryReadinessCalculator,
    calculate_category_readiness,
    CATEGORY_SPECS,
    CATEGORY_WEIGHTS,
    REQUIRED_CERTIFICATION,
    REQUIRED_PRIVACY_STANDARD,
)

__all__ = [
    # Classes
    "CategoryReadinessCalculator",
    # Models
    "CategoryBreakdown",
    "CategorySpec",
    "ComplianceFlag",
    "FlagSeverity",
    "MissingRequirement",
    "ReadinessBreakdown",
    "ReadinessCategory",
    "RequirementPriority",
    # Functions
    "calculate_category_readiness",
    # Constants
    "CATEGORY_SPECS",
    "CATEGORY_WEIGHTS",
    "REQUIRED_CERTIFICATION",
    "REQUIRED_PRIVACY_STANDARD",
]
