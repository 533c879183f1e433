"""
Supplier Comparison - Data Definitions

Pydantic models for cohort-relative supplier scoring.
Base metrics -> cohort normalization -> weighted aggregation.

Author: TenderCortex Team
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from skills.supplier_signals import SupplierIdentity


class MetricName(str, Enum):
    """
    Las siete métricas comparables.

    Los valores coinciden con los ids de criterio de las matrices
    de evaluación del comprador.
    """
    REQUIREMENTS_COVERAGE = "requirementsCoverage"
    PRICING_COMPETITIVENESS = "pricingCompetitiveness"
    TECHNICAL_STRENGTH = "technicalStrength"
    DIFFERENTIATORS = "differentiators"
    RISK_PROFILE = "riskProfile"
    ASSUMPTIONS_QUALITY = "assumptionsQuality"
    DEMO_QUALITY = "demoQuality"

    @property
    def field_name(self) -> str:
        """Attribute name on the metrics models."""
        return METRIC_FIELDS[self]


METRIC_FIELDS: Dict[MetricName, str] = {
    MetricName.REQUIREMENTS_COVERAGE: "requirements_coverage",
    MetricName.PRICING_COMPETITIVENESS: "pricing_competitiveness",
    MetricName.TECHNICAL_STRENGTH: "technical_strength",
    MetricName.DIFFERENTIATORS: "differentiators",
    MetricName.RISK_PROFILE: "risk_profile",
    MetricName.ASSUMPTIONS_QUALITY: "assumptions_quality",
    MetricName.DEMO_QUALITY: "demo_quality",
}


WeightVector = Dict[MetricName, float]


class WeightResolutionStatus(str, Enum):
    """OK: todos los overrides aplicados. WARNING: hubo ids desconocidos."""
    OK = "ok"
    WARNING = "warning"


class _MetricsFields(BaseModel):
    requirements_coverage: float = Field(default=0.0, ge=0, le=100)
    technical_strength: float = Field(default=0.0, ge=0, le=100)
    differentiators: float = Field(default=0.0, ge=0, le=100)
    risk_profile: float = Field(default=100.0, ge=0, le=100)
    assumptions_quality: float = Field(default=100.0, ge=0, le=100)
    demo_quality: float = Field(default=50.0, ge=0, le=100)
    total_cost: Optional[float] = Field(
        default=None,
        description="Costo bruto reportado, usado para normalizar el precio."
    )
    identity: SupplierIdentity = Field(default_factory=SupplierIdentity)

    def value_of(self, metric: MetricName) -> float:
        value = getattr(self, metric.field_name)
        return 0.0 if value is None else float(value)


class BaseMetrics(_MetricsFields):
    """
    Métricas de un proveedor antes de compararlo con la cohorte.

    ``pricing_competitiveness`` queda sin resolver (None) hasta la
    normalización porque depende del resto de proveedores.
    """

    pricing_competitiveness: Optional[float] = Field(default=None, ge=0, le=100)


class NormalizedMetrics(_MetricsFields):
    """Métricas con el precio ya resuelto a 0-100 relativo a la cohorte."""

    pricing_competitiveness: float = Field(ge=0, le=100)


class CriterionWeight(BaseModel):
    """Override de peso proveniente de una matriz de evaluación."""

    id: str = Field(..., min_length=1, description="Id del criterio (ej. 'requirementsCoverage').")
    label: Optional[str] = Field(default=None, description="Etiqueta visible del criterio.")
    weight: float = Field(..., ge=0, allow_inf_nan=False, description="Peso relativo del criterio.")


class EvaluationMatrix(BaseModel):
    name: str = Field(default="Custom Matrix")
    criteria: List[CriterionWeight] = Field(default_factory=list)


class WeightResolution(BaseModel):
    """
    Resultado etiquetado de la resolución de pesos.

    Los ids desconocidos no se aplican pero tampoco se pierden:
    quedan en ``unknown_ids`` y el estado pasa a WARNING.
    """

    status: WeightResolutionStatus = WeightResolutionStatus.OK
    weights: Dict[MetricName, float]
    unknown_ids: List[str] = Field(default_factory=list)

    @property
    def total_weight(self) -> float:
        return sum(self.weights.values())


class ComparisonBreakdown(BaseModel):
    """Resultado explicable de un proveedor dentro de la cohorte."""

    metrics: NormalizedMetrics
    weighted_scores: Dict[MetricName, float] = Field(
        description="Contribución ponderada de cada métrica al total."
    )
    total_score: int = Field(ge=0, description="Suma redondeada de contribuciones.")
    supplier_name: str = ""
    supplier_email: str = ""
    organization: Optional[str] = None
    response_id: Optional[str] = None
    rank: Optional[int] = Field(
        default=None,
        ge=1,
        description="Posición en el ranking; solo la asigna rank_comparisons."
    )

    def top_contributors(self, limit: int = 3) -> List[MetricName]:
        """Metrics that contributed most to the total, highest first."""
        ordered = sorted(
            self.weighted_scores.items(),
            key=lambda item: item[1],
            reverse=True,
        )
        return [metric for metric, _ in ordered[:limit]]

    def to_summary(self) -> str:
        """Resumen de una línea para logs y reportes."""
        position = f"#{self.rank} " if self.rank else ""
        drivers = ", ".join(m.value for m in self.top_contributors())
        return (
            f"{position}{self.supplier_name or self.response_id or 'unknown'} | "
            f"Score: {self.total_score} | Drivers: {drivers}"
        )
