"""
Supplier Signals

Typed, optional-by-default records for the facts extracted from a
supplier response. Shared by the comparison and readiness skills.
"""

from .definition import (
    ComplianceFindings,
    DemoQualityRating,
    DemoSummary,
    ExtractedSignals,
    HiddenFeeAlert,
    ImpactLevel,
    MandatoryRequirementItem,
    MandatoryRequirementsStatus,
    PricingSignal,
    RequirementCoverageItem,
    RequirementsCoverage,
    RequirementStatus,
    RiskFlag,
    Severity,
    SupplierIdentity,
)

__all__ = [
    # Models
    "ComplianceFindings",
    "DemoSummary",
    "ExtractedSignals",
    "HiddenFeeAlert",
    "MandatoryRequirementItem",
    "MandatoryRequirementsStatus",
    "PricingSignal",
    "RequirementCoverageItem",
    "RequirementsCoverage",
    "RiskFlag",
    "SupplierIdentity",
    # Enums
    "DemoQualityRating",
    "ImpactLevel",
    "RequirementStatus",
    "Severity",
]
