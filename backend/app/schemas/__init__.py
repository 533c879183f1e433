from app.schemas.requests import CategoryReadinessRequest, ComparisonRunRequest, ReadinessRunRequest
from app.schemas.responses import (
    ComparisonRunResponse,
    ReadinessRunResponse,
    ReadinessSummary,
    SupplierReadinessResult,
)

__all__ = [
    "CategoryReadinessRequest",
    "ComparisonRunRequest",
    "ComparisonRunResponse",
    "ReadinessRunRequest",
    "ReadinessRunResponse",
    "ReadinessSummary",
    "SupplierReadinessResult",
]
