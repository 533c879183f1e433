"""
Pytest configuration and shared fixtures.

This module provides common fixtures for testing the supplier evaluation
engine. Everything is pure and in-memory, so fixtures only build signals.

Usage:
    def test_example(make_signals):
        signals = make_signals(name="Acme", total_cost=1000.0)
"""

import pytest

from skills.supplier_signals import (
    ComplianceFindings,
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


# =============================================================================
# SIGNAL FACTORIES
# =============================================================================


@pytest.fixture
def make_signals():
    """
    Factory fixture for ExtractedSignals.

    Only the signals passed in are set; everything else stays absent.

    Usage:
        def test_example(make_signals):
            signals = make_signals(name="Acme", claims=3, total_cost=500.0)
    """
    def _create(
        name: str = "Supplier",
        response_id: str | None = None,
        coverage: float | None = None,
        requirements: list[RequirementStatus] | None = None,
        total_cost: float | None = None,
        hidden_fees: list[Severity] | None = None,
        claims: int | None = None,
        differentiators: int | None = None,
        risks: list[Severity] | None = None,
        assumptions: int | None = None,
        demo: tuple[int, int] | None = None,
        demo_rating: str | None = None,
        compliance_score: float | None = None,
        mandatory: MandatoryRequirementsStatus | None = None,
    ) -> ExtractedSignals:
        fields = {
            "identity": SupplierIdentity(
                response_id=response_id,
                supplier_name=name,
                supplier_email=f"{name.lower().replace(' ', '.')}@example.com",
            ),
        }
        if coverage is not None or requirements is not None:
            fields["requirements_coverage"] = RequirementsCoverage(
                coverage_percentage=coverage,
                requirements=[
                    RequirementCoverageItem(requirement=f"REQ-{i}", status=status)
                    for i, status in enumerate(requirements or [], start=1)
                ],
            )
        if total_cost is not None or hidden_fees is not None:
            fields["pricing"] = PricingSignal(
                total_cost=total_cost,
                hidden_fee_alerts=[
                    HiddenFeeAlert(description=f"Fee {i}", severity=severity)
                    for i, severity in enumerate(hidden_fees or [], start=1)
                ],
            )
        if claims is not None:
            fields["technical_claims"] = [f"Claim {i}" for i in range(claims)]
        if differentiators is not None:
            fields["differentiators"] = [f"Differentiator {i}" for i in range(differentiators)]
        if risks is not None:
            fields["risk_flags"] = [
                RiskFlag(severity=severity, category=f"category-{i}", description=f"Risk {i}")
                for i, severity in enumerate(risks, start=1)
            ]
        if assumptions is not None:
            fields["assumptions"] = [f"Assumption {i}" for i in range(assumptions)]
        if demo is not None or demo_rating is not None:
            capabilities, gaps = demo or (0, 0)
            fields["demo_summary"] = DemoSummary(
                key_capabilities=[f"Capability {i}" for i in range(capabilities)],
                gaps=[f"Gap {i}" for i in range(gaps)],
                overall_quality_rating=demo_rating,
            )
        if compliance_score is not None:
            fields["compliance_findings"] = ComplianceFindings(
                overall_compliance_score=compliance_score,
            )
        if mandatory is not None:
            fields["mandatory_status"] = mandatory
        return ExtractedSignals(**fields)
    return _create


@pytest.fixture
def make_mandatory():
    """
    Factory fixture for MandatoryRequirementsStatus.

    Usage:
        def test_example(make_mandatory):
            status = make_mandatory(unmet=[ImpactLevel.HIGH], partial=1)
    """
    def _create(
        unmet: list[ImpactLevel] | None = None,
        partial: int = 0,
    ) -> MandatoryRequirementsStatus:
        return MandatoryRequirementsStatus(
            unmet_mandatory_list=[
                MandatoryRequirementItem(requirement=f"MR-{i}", status="Unmet", impact=impact)
                for i, impact in enumerate(unmet or [], start=1)
            ],
            partially_met_mandatory_list=[
                MandatoryRequirementItem(requirement=f"MP-{i}", status="Partial")
                for i in range(1, partial + 1)
            ],
        )
    return _create


@pytest.fixture
def sample_cohort(make_signals):
    """
    Pre-built cohort of three suppliers with distinct costs.

    Usage:
        def test_example(sample_cohort):
            assert len(sample_cohort) == 3
    """
    return [
        make_signals(
            name="Acme", response_id="r-1", coverage=80, total_cost=100_000.0,
            claims=2, differentiators=1, risks=[Severity.LOW, Severity.MEDIUM],
            assumptions=1, demo=(3, 1),
        ),
        make_signals(
            name="Globex", response_id="r-2", coverage=95, total_cost=150_000.0,
            claims=6, differentiators=3, risks=[], assumptions=0, demo=(5, 0),
        ),
        make_signals(
            name="Initech", response_id="r-3", coverage=60, total_cost=200_000.0,
            claims=1, risks=[Severity.HIGH, Severity.HIGH, Severity.MEDIUM],
            assumptions=4,
        ),
    ]


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
