"""
Cohort evaluation service.

Runs the scoring skills over a full cohort of supplier responses and
shapes the results for the API. Nothing is cached or persisted: every
call computes a fresh snapshot from the signals it receives.

Example:
    from app.services.evaluation import run_comparison

    result = run_comparison(cohort, matrix)
    best = result.comparisons[0]
"""

from collections import Counter
from typing import Any, Mapping, Optional, Sequence
from uuid import uuid4

from app.core.config import settings
from app.core.exceptions import CohortValidationError, EvaluationProcessingError
from app.core.logging import EvaluationLogger
from app.schemas import (
    ComparisonRunResponse,
    ReadinessRunResponse,
    ReadinessSummary,
    SupplierReadinessResult,
)
from skills.category_readiness import ReadinessBreakdown, calculate_category_readiness
from skills.readiness_classifier import ReadinessIndicator, classify_readiness
from skills.supplier_comparison import (
    EvaluationMatrix,
    WeightResolutionStatus,
    aggregate_scores,
    compute_base_metrics,
    matrix_to_weights,
    normalize_across_cohort,
    rank_comparisons,
)
from skills.supplier_signals import ExtractedSignals

logger = EvaluationLogger("service")

DEFAULT_MATRIX_NAME = "Default Weights"


def validate_cohort(cohort: Sequence[ExtractedSignals], max_size: Optional[int] = None) -> None:
    """Rechaza cohortes demasiado grandes o con response_id duplicados."""
    limit = max_size or settings.max_cohort_size
    if len(cohort) > limit:
        raise CohortValidationError(
            f"Cohort has {len(cohort)} suppliers, maximum is {limit}",
            cohort_size=len(cohort),
        )

    ids = Counter(s.identity.response_id for s in cohort if s.identity.response_id)
    duplicates = sorted(rid for rid, count in ids.items() if count > 1)
    if duplicates:
        raise CohortValidationError(
            "Duplicate response ids in cohort",
            cohort_size=len(cohort),
            response_ids=duplicates,
        )


def run_comparison(
    cohort: Sequence[ExtractedSignals],
    matrix: Optional[EvaluationMatrix] = None,
) -> ComparisonRunResponse:
    """
    Compare a cohort: base metrics, pricing normalization, weighting, ranking.

    An empty cohort yields an empty comparison list.

    Raises:
        CohortValidationError: If the cohort is oversized or has duplicate ids.
        EvaluationProcessingError: If a scoring stage fails unexpectedly.
    """
    validate_cohort(cohort)
    logger.run_start("comparison", len(cohort), trace_id=uuid4().hex[:8])

    stage = "metrics"
    try:
        base_metrics = [compute_base_metrics(signals) for signals in cohort]
        logger.stage(stage, f"{len(base_metrics)} supplier(s)")
        stage = "normalize"
        normalized = normalize_across_cohort(base_metrics)
        costed = sum(1 for m in base_metrics if m.total_cost is not None)
        logger.stage(stage, f"{costed} with reported cost")
        stage = "weights"
        resolution = matrix_to_weights(matrix)
        if resolution.status == WeightResolutionStatus.WARNING:
            logger.weight_warning(resolution.unknown_ids)
        logger.stage(stage, f"total weight {resolution.total_weight:g}")
        stage = "aggregate"
        ranked = rank_comparisons(aggregate_scores(normalized, resolution.weights))
        logger.stage(stage)
    except Exception as e:
        logger.error(stage, e)
        raise EvaluationProcessingError(
            "Failed to run supplier comparison",
            stage=stage,
            original_error=e,
        ) from e

    for breakdown in ranked:
        logger.supplier_result(breakdown.supplier_name or str(breakdown.response_id), breakdown.to_summary())

    logger.run_end("comparison", {
        "Suppliers": len(ranked),
        "Matrix": matrix.name if matrix else DEFAULT_MATRIX_NAME,
        "Weight status": resolution.status.value,
    })

    return ComparisonRunResponse(
        matrix_used=matrix is not None,
        matrix_name=matrix.name if matrix else DEFAULT_MATRIX_NAME,
        weights=resolution.weights,
        weight_status=resolution.status,
        unknown_criteria=resolution.unknown_ids,
        comparisons=ranked,
    )


def run_readiness(cohort: Sequence[ExtractedSignals]) -> ReadinessRunResponse:
    """
    Classify readiness for every supplier in the cohort.

    Results are sorted by readiness score, highest first; ties keep
    submission order.

    Raises:
        CohortValidationError: If the cohort is oversized or has duplicate ids.
        EvaluationProcessingError: If classification fails unexpectedly.
    """
    validate_cohort(cohort)
    logger.run_start("readiness", len(cohort))

    results: list[SupplierReadinessResult] = []
    for signals in cohort:
        try:
            analysis = classify_readiness(signals)
        except Exception as e:
            logger.error("classify", e)
            raise EvaluationProcessingError(
                "Failed to classify supplier readiness",
                stage="classify",
                original_error=e,
                details=signals.identity.response_id,
            ) from e

        identity = signals.identity
        results.append(SupplierReadinessResult(
            response_id=identity.response_id,
            supplier_name=identity.supplier_name,
            organization=identity.organization,
            label=analysis.indicator.label,
            readiness=analysis,
        ))
        logger.supplier_result(identity.supplier_name or str(identity.response_id), analysis.to_summary())

    results.sort(key=lambda r: r.readiness.score, reverse=True)

    counts = Counter(r.readiness.indicator for r in results)
    summary = ReadinessSummary(
        ready=counts[ReadinessIndicator.READY],
        conditional=counts[ReadinessIndicator.CONDITIONAL],
        not_ready=counts[ReadinessIndicator.NOT_READY],
    )

    logger.run_end("readiness", summary.model_dump())

    return ReadinessRunResponse(
        suppliers_analyzed=len(results),
        suppliers=results,
        summary=summary,
    )


def run_category_readiness(structured_data: Optional[Mapping[str, Any]]) -> ReadinessBreakdown:
    """Completeness breakdown of a single supplier's structured answers."""
    try:
        return calculate_category_readiness(structured_data)
    except Exception as e:
        logger.error("categories", e)
        raise EvaluationProcessingError(
            "Failed to calculate category readiness",
            stage="categories",
            original_error=e,
        ) from e
