from pydantic import BaseModel, Field

from skills.readiness_classifier import ReadinessAnalysis
from skills.supplier_comparison import ComparisonBreakdown, MetricName, WeightResolutionStatus


class ComparisonRunResponse(BaseModel):
    matrix_used: bool
    matrix_name: str
    weights: dict[MetricName, float]
    weight_status: WeightResolutionStatus = WeightResolutionStatus.OK
    unknown_criteria: list[str] = Field(default_factory=list, description="Criterios de la matriz que no se aplicaron")
    comparisons: list[ComparisonBreakdown] = Field(default_factory=list, description="Resultados ordenados por ranking")


class SupplierReadinessResult(BaseModel):
    response_id: str | None = None
    supplier_name: str = ""
    organization: str | None = None
    label: str = Field(description="Etiqueta visible del veredicto")
    readiness: ReadinessAnalysis


class ReadinessSummary(BaseModel):
    ready: int = 0
    conditional: int = 0
    not_ready: int = 0


class ReadinessRunResponse(BaseModel):
    suppliers_analyzed: int
    suppliers: list[SupplierReadinessResult] = Field(default_factory=list)
    summary: ReadinessSummary = Field(default_factory=ReadinessSummary)
