"""
Supplier Comparison - Implementation

Deterministic cohort comparison with:
- Bounded base metrics per supplier response
- Inverse min-max pricing normalization across the cohort
- Default weights with evaluation-matrix overrides
- Explainable weighted aggregation and deterministic ranking

Author: TenderCortex Team
"""

import logging
import math
from typing import Dict, Iterable, List, Optional, Sequence

from skills.supplier_signals import ExtractedSignals

from .definition import (
    BaseMetrics,
    ComparisonBreakdown,
    CriterionWeight,
    EvaluationMatrix,
    METRIC_FIELDS,
    MetricName,
    NormalizedMetrics,
    WeightResolution,
    WeightResolutionStatus,
    WeightVector,
)

logger = logging.getLogger(__name__)


# Default weights when the buyer has no evaluation matrix (sum = 100)
DEFAULT_WEIGHTS: Dict[MetricName, float] = {
    MetricName.REQUIREMENTS_COVERAGE: 30.0,
    MetricName.PRICING_COMPETITIVENESS: 25.0,
    MetricName.TECHNICAL_STRENGTH: 15.0,
    MetricName.DIFFERENTIATORS: 10.0,
    MetricName.RISK_PROFILE: 10.0,  # inverse
    MetricName.ASSUMPTIONS_QUALITY: 5.0,  # inverse
    MetricName.DEMO_QUALITY: 5.0,
}

# Points per item for the count-based metrics
POINTS_PER_CLAIM = 10
POINTS_PER_DIFFERENTIATOR = 15
PENALTY_PER_RISK = 10
PENALTY_PER_ASSUMPTION = 10
DEMO_BASELINE = 50
POINTS_PER_DEMO_ITEM = 10

# Pricing scores for the degenerate cohorts
PRICING_NO_DATA_SCORE = 50.0
PRICING_SAME_COST_SCORE = 100.0

METRIC_SCALE = 100.0


def _clamp(value: float, low: float = 0.0, high: float = METRIC_SCALE) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative totals (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def _count(items: Optional[Sequence]) -> int:
    return len(items) if items else 0


def _metric_for_id(criterion_id: str) -> Optional[MetricName]:
    """Accepts the matrix id ('riskProfile') or the field name ('risk_profile')."""
    key = criterion_id.strip()
    for metric, field_name in METRIC_FIELDS.items():
        if key == metric.value or key == field_name:
            return metric
    return None


class SupplierComparisonEngine:
    """
    Deterministic comparison engine for a cohort of supplier responses.

    Stateless: every call builds a fresh result and nothing is kept
    between runs. Each stage is also exposed as a module-level function.

    Usage:
        engine = SupplierComparisonEngine()
        base = [engine.compute_base_metrics(s) for s in cohort]
        normalized = engine.normalize_across_cohort(base)
        resolution = engine.resolve_weights(DEFAULT_WEIGHTS, matrix.criteria)
        ranked = engine.rank(engine.aggregate(normalized, resolution.weights))
    """

    def compute_base_metrics(self, signals: ExtractedSignals) -> BaseMetrics:
        """
        Map one supplier's extracted signals to bounded base metrics.

        Missing signals fall back to neutral values; pricing stays
        unresolved because it only makes sense relative to the cohort.
        """
        requirements_coverage = 0.0
        coverage = signals.requirements_coverage
        if coverage is not None and coverage.coverage_percentage:
            requirements_coverage = _clamp(coverage.coverage_percentage)

        total_cost: Optional[float] = None
        if signals.pricing is not None:
            # Zero or negative amounts are extraction noise, not a price
            for amount in (signals.pricing.total_cost, signals.pricing.estimated_total):
                if amount is not None and amount > 0:
                    total_cost = amount
                    break

        technical_strength = min(
            _count(signals.technical_claims) * POINTS_PER_CLAIM, METRIC_SCALE
        )
        differentiators = min(
            _count(signals.differentiators) * POINTS_PER_DIFFERENTIATOR, METRIC_SCALE
        )
        risk_profile = max(METRIC_SCALE - _count(signals.risk_flags) * PENALTY_PER_RISK, 0.0)
        assumptions_quality = max(
            METRIC_SCALE - _count(signals.assumptions) * PENALTY_PER_ASSUMPTION, 0.0
        )

        demo_quality = float(DEMO_BASELINE)
        if signals.demo_summary is not None:
            demo = signals.demo_summary
            demo_quality = _clamp(
                DEMO_BASELINE
                + len(demo.key_capabilities) * POINTS_PER_DEMO_ITEM
                - len(demo.gaps) * POINTS_PER_DEMO_ITEM
            )

        return BaseMetrics(
            requirements_coverage=requirements_coverage,
            pricing_competitiveness=None,
            technical_strength=technical_strength,
            differentiators=differentiators,
            risk_profile=risk_profile,
            assumptions_quality=assumptions_quality,
            demo_quality=demo_quality,
            total_cost=total_cost,
            identity=signals.identity,
        )

    def normalize_across_cohort(
        self,
        metrics_list: Sequence[BaseMetrics],
    ) -> List[NormalizedMetrics]:
        """
        Resolve pricing competitiveness relative to the cohort.

        Cheapest supplier scores 100, most expensive 0. Suppliers
        without a cost get the neutral 50. Output keeps input order.
        """
        if not metrics_list:
            return []

        pricing_scores = [PRICING_NO_DATA_SCORE] * len(metrics_list)
        costed = [
            (idx, m.total_cost)
            for idx, m in enumerate(metrics_list)
            if m.total_cost is not None
        ]

        if costed:
            min_cost = min(cost for _, cost in costed)
            max_cost = max(cost for _, cost in costed)
            spread = max_cost - min_cost

            for idx, cost in costed:
                if spread == 0:
                    pricing_scores[idx] = PRICING_SAME_COST_SCORE
                else:
                    pricing_scores[idx] = _clamp(
                        METRIC_SCALE - ((cost - min_cost) / spread) * METRIC_SCALE
                    )

        logger.debug(
            f"Normalized pricing for {len(metrics_list)} suppliers "
            f"({len(costed)} with cost)"
        )

        return [
            NormalizedMetrics(
                **metrics.model_dump(exclude={"pricing_competitiveness", "identity"}),
                identity=metrics.identity,
                pricing_competitiveness=pricing_scores[idx],
            )
            for idx, metrics in enumerate(metrics_list)
        ]

    def resolve_weights(
        self,
        defaults: WeightVector,
        overrides: Optional[Iterable[CriterionWeight]] = None,
    ) -> WeightResolution:
        """
        Overlay buyer overrides on the default weight vector.

        Unknown criterion ids are not applied; they are reported in the
        result and logged. Weights are not renormalized.
        """
        weights: Dict[MetricName, float] = dict(defaults)
        unknown_ids: List[str] = []

        for criterion in overrides or []:
            metric = _metric_for_id(criterion.id)
            if metric is None:
                unknown_ids.append(criterion.id)
                continue
            weights[metric] = criterion.weight

        if unknown_ids:
            logger.warning(f"Ignoring unknown weight criteria: {unknown_ids}")
            return WeightResolution(
                status=WeightResolutionStatus.WARNING,
                weights=weights,
                unknown_ids=unknown_ids,
            )

        return WeightResolution(weights=weights)

    def aggregate(
        self,
        normalized_list: Sequence[NormalizedMetrics],
        weights: WeightVector,
    ) -> List[ComparisonBreakdown]:
        """Weighted contribution per metric and rounded total, per supplier."""
        breakdowns = []
        for metrics in normalized_list:
            weighted_scores = {
                metric: metrics.value_of(metric) * weights.get(metric, 0.0) / METRIC_SCALE
                for metric in MetricName
            }
            identity = metrics.identity
            breakdowns.append(ComparisonBreakdown(
                metrics=metrics,
                weighted_scores=weighted_scores,
                total_score=round_half_up(sum(weighted_scores.values())),
                supplier_name=identity.supplier_name,
                supplier_email=identity.supplier_email,
                organization=identity.organization,
                response_id=identity.response_id,
            ))
        return breakdowns

    def rank(
        self,
        breakdowns: Sequence[ComparisonBreakdown],
    ) -> List[ComparisonBreakdown]:
        """
        Order by total score, then requirements coverage, then
        submission order. Returns ranked copies.
        """
        order = sorted(
            range(len(breakdowns)),
            key=lambda idx: (
                -breakdowns[idx].total_score,
                -breakdowns[idx].metrics.requirements_coverage,
                idx,
            ),
        )
        return [
            breakdowns[idx].model_copy(update={"rank": position})
            for position, idx in enumerate(order, start=1)
        ]


_engine = SupplierComparisonEngine()


# Convenience functions
def compute_base_metrics(signals: ExtractedSignals) -> BaseMetrics:
    return _engine.compute_base_metrics(signals)


def normalize_across_cohort(metrics_list: Sequence[BaseMetrics]) -> List[NormalizedMetrics]:
    return _engine.normalize_across_cohort(metrics_list)


def resolve_weights(
    defaults: WeightVector = DEFAULT_WEIGHTS,
    overrides: Optional[Iterable[CriterionWeight]] = None,
) -> WeightResolution:
    return _engine.resolve_weights(defaults, overrides)


def matrix_to_weights(matrix: Optional[EvaluationMatrix]) -> WeightResolution:
    """Resolve weights for an optional buyer evaluation matrix."""
    if matrix is None:
        return _engine.resolve_weights(DEFAULT_WEIGHTS)
    return _engine.resolve_weights(DEFAULT_WEIGHTS, matrix.criteria)


def aggregate_scores(
    normalized_list: Sequence[NormalizedMetrics],
    weights: WeightVector,
) -> List[ComparisonBreakdown]:
    return _engine.aggregate(normalized_list, weights)


def rank_comparisons(breakdowns: Sequence[ComparisonBreakdown]) -> List[ComparisonBreakdown]:
    return _engine.rank(breakdowns)
