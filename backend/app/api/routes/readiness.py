"""Endpoints de readiness: veredicto por señales y completitud por categorías."""

from fastapi import APIRouter, HTTPException, status

from app.core.exceptions import CohortValidationError, EvaluationProcessingError
from app.core.logging import get_logger
from app.schemas import CategoryReadinessRequest, ReadinessRunRequest, ReadinessRunResponse
from app.services import run_category_readiness, run_readiness
from skills.category_readiness import ReadinessBreakdown

logger = get_logger(__name__)
router = APIRouter()


@router.post("/readiness/classify", response_model=ReadinessRunResponse)
def classify_supplier_readiness(request: ReadinessRunRequest) -> ReadinessRunResponse:
    """Clasifica READY / CONDITIONAL / NOT_READY para cada proveedor."""
    try:
        return run_readiness(request.suppliers)
    except CohortValidationError as e:
        logger.warning(f"[READINESS] Cohorte rechazada: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except EvaluationProcessingError as e:
        logger.error(f"[READINESS] Error clasificando: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error calculando readiness: {e.message}",
        )


@router.post("/readiness/categories", response_model=ReadinessBreakdown)
def category_readiness(request: CategoryReadinessRequest) -> ReadinessBreakdown:
    """Desglose de completitud de las respuestas estructuradas de un proveedor."""
    try:
        return run_category_readiness(request.structured_data)
    except EvaluationProcessingError as e:
        logger.error(f"[CATEGORIES] Error calculando desglose: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error calculando readiness por categorías: {e.message}",
        )
