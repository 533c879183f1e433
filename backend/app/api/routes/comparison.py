"""Endpoints de comparación ponderada de proveedores."""

from fastapi import APIRouter, HTTPException, status

from app.core.exceptions import CohortValidationError, EvaluationProcessingError
from app.core.logging import get_logger
from app.schemas import ComparisonRunRequest, ComparisonRunResponse
from app.services import run_comparison

logger = get_logger(__name__)
router = APIRouter()


@router.post("/comparison/run", response_model=ComparisonRunResponse)
def run_supplier_comparison(request: ComparisonRunRequest) -> ComparisonRunResponse:
    """Calcula scores ponderados y ranking para toda la cohorte."""
    try:
        return run_comparison(request.suppliers, request.evaluation_matrix)
    except CohortValidationError as e:
        logger.warning(f"[COMPARISON] Cohorte rechazada: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except EvaluationProcessingError as e:
        logger.error(f"[COMPARISON] Error en la comparación: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error ejecutando la comparación: {e.message}",
        )
