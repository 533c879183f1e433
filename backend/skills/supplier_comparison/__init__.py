"""
Supplier Comparison Skill

Deterministic, explainable 0-100 scoring of supplier responses
across a cohort: base metrics, pricing normalization, weighting.
"""

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

from .impl import (
    SupplierComparisonEngine,
    aggregate_scores,
    compute_base_metrics,
    matrix_to_weights,
    normalize_across_cohort,
    rank_comparisons,
    resolve_weights,
    round_half_up,
    DEFAULT_WEIGHTS,
    PRICING_NO_DATA_SCORE,
    PRICING_SAME_COST_SCORE,
)

__all__ = [
    # Classes
    "SupplierComparisonEngine",
    # Models
    "BaseMetrics",
    "ComparisonBreakdown",
    "CriterionWeight",
    "EvaluationMatrix",
    "MetricName",
    "NormalizedMetrics",
    "WeightResolution",
    "WeightResolutionStatus",
    "WeightVector",
    # Functions
    "aggregate_scores",
    "compute_base_metrics",
    "matrix_to_weights",
    "normalize_across_cohort",
    "rank_comparisons",
    "resolve_weights",
    "round_half_up",
    # Constants
    "DEFAULT_WEIGHTS",
    "METRIC_FIELDS",
    "PRICING_NO_DATA_SCORE",
    "PRICING_SAME_COST_SCORE",
]
