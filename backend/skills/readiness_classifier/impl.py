"""
Readiness Classifier - Implementation

Rule-based supplier readiness with:
- Severity-weighted deductions from a perfect score
- Critical issues / conditional factors / strengths bookkeeping
- Clamped score and three-tier verdict
- Prose rationale citing the verdict's drivers

Author: TenderCortex Team
"""

import logging
from typing import List, Tuple

from skills.supplier_signals import (
    ComplianceFindings,
    DemoQualityRating,
    DemoSummary,
    ExtractedSignals,
    ImpactLevel,
    MandatoryRequirementsStatus,
    PricingSignal,
    RequirementsCoverage,
    RequirementStatus,
    RiskFlag,
    Severity,
)

from .definition import ReadinessAnalysis, ReadinessIndicator

logger = logging.getLogger(__name__)


BASE_SCORE = 100

# Mandatory requirements
MANDATORY_UNMET_BLOCKING = 3
DEDUCTION_MANDATORY_BLOCKING = 40
DEDUCTION_MANDATORY_CRITICAL = 35
DEDUCTION_MANDATORY_NON_CRITICAL = 15
DEDUCTION_PER_PARTIAL_MANDATORY = 5
CRITICAL_IMPACTS = {ImpactLevel.HIGH, ImpactLevel.CRITICAL}

# Compliance score bands
COMPLIANCE_FAILURE_BELOW = 50
COMPLIANCE_GAPS_BELOW = 70
COMPLIANCE_STRONG_FROM = 85
DEDUCTION_COMPLIANCE_FAILURE = 25
DEDUCTION_COMPLIANCE_GAPS = 10

# Risk flags
HIGH_RISK_SEVERITIES = {Severity.HIGH, Severity.CRITICAL}
HIGH_RISKS_BLOCKING = 3
MEDIUM_RISKS_TOLERATED = 3
MEDIUM_RISKS_FOR_STRENGTH = 2
DEDUCTION_HIGH_RISKS_BLOCKING = 30
DEDUCTION_PER_HIGH_RISK = 12
DEDUCTION_MEDIUM_RISKS = 8

# Pricing and coverage
CRITICAL_FEE_SEVERITIES = {Severity.HIGH, Severity.CRITICAL}
DEDUCTION_HIDDEN_FEES = 8
UNMET_REQUIREMENTS_TOLERATED = 5
PARTIAL_REQUIREMENTS_FOR_STRENGTH = 2
DEDUCTION_REQUIREMENTS_GAPS = 10

STRONG_DEMO_RATINGS = {DemoQualityRating.EXCELLENT, DemoQualityRating.GOOD}

# Verdict thresholds
THRESHOLD_NOT_READY = 50
THRESHOLD_READY = 70
CRITICAL_ISSUES_NOT_READY = 3
CONDITIONAL_FACTORS_CONDITIONAL = 2


class _Tally:
    """Running score and findings for a single classification."""

    def __init__(self) -> None:
        self.score = BASE_SCORE
        self.critical: List[str] = []
        self.conditional: List[str] = []
        self.strengths: List[str] = []
        self.kill_switch = False


class ReadinessClassifier:
    """
    Deterministic readiness classifier for one supplier response.

    Rules run in a fixed order and each one is skipped when its signal
    is absent, so partial extractions never raise.

    Three or more unmet mandatory requirements act as a kill switch:
    the verdict is NOT_READY whatever the remaining score.

    Usage:
        classifier = ReadinessClassifier()
        analysis = classifier.classify(signals)

        if analysis.indicator == ReadinessIndicator.NOT_READY:
            print(analysis.rationale)
    """

    def classify(self, signals: ExtractedSignals) -> ReadinessAnalysis:
        """
        Classify readiness from the extracted signals.

        Args:
            signals: Extracted signals of one supplier response.

        Returns:
            ReadinessAnalysis with indicator, clamped score and rationale.
        """
        tally = _Tally()

        if signals.mandatory_status is not None:
            self._check_mandatory(tally, signals.mandatory_status)
        if signals.compliance_findings is not None:
            self._check_compliance(tally, signals.compliance_findings)
        if signals.risk_flags:
            self._check_risks(tally, signals.risk_flags)
        if signals.pricing is not None:
            self._check_pricing(tally, signals.pricing)
        if signals.requirements_coverage is not None:
            self._check_coverage(tally, signals.requirements_coverage)
        if signals.demo_summary is not None:
            self._check_demo(tally, signals.demo_summary)

        score = max(0, min(BASE_SCORE, tally.score))
        if tally.kill_switch:
            logger.warning(
                f"Kill switch activated for '{signals.identity.supplier_name}': "
                f"{tally.critical[0]}"
            )
        indicator, rationale = self._determine_indicator(tally, score)

        logger.info(
            f"Readiness for '{signals.identity.supplier_name or signals.identity.response_id}': "
            f"{indicator.value} (score {score}, "
            f"{len(tally.critical)} critical, {len(tally.conditional)} conditional)"
        )

        return ReadinessAnalysis(
            indicator=indicator,
            score=score,
            rationale=rationale,
            critical_issues=tally.critical,
            conditional_factors=tally.conditional,
            strengths=tally.strengths,
        )

    def _check_mandatory(self, tally: _Tally, status: MandatoryRequirementsStatus) -> None:
        unmet = status.unmet_count
        partial = status.partial_count

        if unmet >= MANDATORY_UNMET_BLOCKING:
            tally.critical.append(f"{unmet} mandatory requirements unmet")
            tally.score -= DEDUCTION_MANDATORY_BLOCKING
            tally.kill_switch = True
        elif unmet > 0:
            critical_unmet = [
                item for item in status.unmet_mandatory_list
                if item.impact in CRITICAL_IMPACTS
            ]
            if critical_unmet:
                names = ", ".join(item.requirement for item in critical_unmet)
                tally.critical.append(
                    f"{len(critical_unmet)} critical mandatory requirement(s) unmet: {names}"
                )
                tally.score -= DEDUCTION_MANDATORY_CRITICAL
            else:
                tally.conditional.append(
                    f"{unmet} non-critical mandatory requirement(s) unmet"
                )
                tally.score -= DEDUCTION_MANDATORY_NON_CRITICAL

        if partial > 0:
            tally.conditional.append(f"{partial} mandatory requirement(s) partially met")
            tally.score -= DEDUCTION_PER_PARTIAL_MANDATORY * partial

        if unmet == 0 and partial <= 1:
            tally.strengths.append("All mandatory requirements met or substantially met")

    def _check_compliance(self, tally: _Tally, findings: ComplianceFindings) -> None:
        score = findings.overall_compliance_score
        shown = f"{score:g}"

        if score < COMPLIANCE_FAILURE_BELOW:
            tally.critical.append(f"Major compliance failures (score: {shown}/100)")
            tally.score -= DEDUCTION_COMPLIANCE_FAILURE
        elif score < COMPLIANCE_GAPS_BELOW:
            tally.conditional.append(
                f"Compliance gaps requiring clarification (score: {shown}/100)"
            )
            tally.score -= DEDUCTION_COMPLIANCE_GAPS
        elif score >= COMPLIANCE_STRONG_FROM:
            tally.strengths.append(f"Strong compliance posture (score: {shown}/100)")

    def _check_risks(self, tally: _Tally, risk_flags: List[RiskFlag]) -> None:
        high = [r for r in risk_flags if r.severity in HIGH_RISK_SEVERITIES]
        medium = [r for r in risk_flags if r.severity == Severity.MEDIUM]
        categories = ", ".join(r.category for r in high)

        if len(high) >= HIGH_RISKS_BLOCKING:
            tally.critical.append(
                f"{len(high)} high-severity risks identified: {categories}"
            )
            tally.score -= DEDUCTION_HIGH_RISKS_BLOCKING
        elif high:
            tally.conditional.append(f"{len(high)} high-severity risk(s): {categories}")
            tally.score -= DEDUCTION_PER_HIGH_RISK * len(high)

        if len(medium) > MEDIUM_RISKS_TOLERATED:
            tally.conditional.append(f"{len(medium)} medium-severity risks identified")
            tally.score -= DEDUCTION_MEDIUM_RISKS

        if not high and len(medium) <= MEDIUM_RISKS_FOR_STRENGTH:
            tally.strengths.append("Low risk profile")

    def _check_pricing(self, tally: _Tally, pricing: PricingSignal) -> None:
        fees = pricing.hidden_fee_alerts
        critical_fees = [f for f in fees if f.severity in CRITICAL_FEE_SEVERITIES]

        if critical_fees:
            descriptions = ", ".join(f.description for f in critical_fees)
            tally.conditional.append(f"Critical hidden fees identified: {descriptions}")
            tally.score -= DEDUCTION_HIDDEN_FEES
        elif not fees:
            tally.strengths.append("Clear pricing with no hidden fees")

    def _check_coverage(self, tally: _Tally, coverage: RequirementsCoverage) -> None:
        does_not_meet = coverage.count_with_status(RequirementStatus.DOES_NOT_MEET)
        partially_meets = coverage.count_with_status(RequirementStatus.PARTIALLY_MEETS)

        if does_not_meet > UNMET_REQUIREMENTS_TOLERATED:
            tally.conditional.append(f"{does_not_meet} requirements not met")
            tally.score -= DEDUCTION_REQUIREMENTS_GAPS
        elif does_not_meet == 0 and partially_meets <= PARTIAL_REQUIREMENTS_FOR_STRENGTH:
            tally.strengths.append("Comprehensive requirements coverage")

    def _check_demo(self, tally: _Tally, demo: DemoSummary) -> None:
        rating = demo.overall_quality_rating
        if rating in STRONG_DEMO_RATINGS:
            tally.strengths.append(f"{rating.value} demo quality")

    def _determine_indicator(self, tally: _Tally, score: int) -> Tuple[ReadinessIndicator, str]:
        """Verdict plus a rationale that cites its top drivers."""
        if (
            tally.kill_switch
            or len(tally.critical) >= CRITICAL_ISSUES_NOT_READY
            or score < THRESHOLD_NOT_READY
        ):
            drivers = tally.critical[:3] or tally.conditional[:3]
            rationale = (
                f"Supplier is not ready for selection (readiness score {score}/100). "
            )
            if tally.critical:
                rationale += f"Critical issues: {'; '.join(drivers)}."
            elif drivers:
                rationale += f"Accumulated issues: {'; '.join(drivers)}."
            return ReadinessIndicator.NOT_READY, rationale

        if (
            tally.critical
            or len(tally.conditional) >= CONDITIONAL_FACTORS_CONDITIONAL
            or score < THRESHOLD_READY
        ):
            issues = (tally.critical + tally.conditional)[:3]
            rationale = "Supplier readiness is conditional."
            if issues:
                rationale += f" Issues to address: {'; '.join(issues)}."
            else:
                rationale += f" Readiness score {score}/100 is below the ready threshold."
            if tally.strengths:
                rationale += f" Strengths: {', '.join(tally.strengths[:2])}."
            return ReadinessIndicator.CONDITIONAL, rationale

        strengths = ", ".join(tally.strengths) if tally.strengths else "No major concerns identified"
        rationale = f"Supplier is ready for selection. {strengths}."
        if tally.conditional:
            rationale += f" Minor considerations: {', '.join(tally.conditional[:2])}."
        return ReadinessIndicator.READY, rationale


# Convenience function
def classify_readiness(signals: ExtractedSignals) -> ReadinessAnalysis:
    """Classify readiness with default settings."""
    return ReadinessClassifier().classify(signals)
