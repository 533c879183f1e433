"""
Supplier Signals - Data Definitions

Typed records for the facts extracted from one supplier response.
Every sub-record is optional: ``None`` means the extractor produced
nothing for that signal, which is different from an empty list.

Author: TenderCortex Team
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Severidad de una alerta o riesgo reportado por la extracción."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class ImpactLevel(str, Enum):
    """Impacto de un requisito obligatorio no cumplido."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class RequirementStatus(str, Enum):
    """Estado de cobertura de un requisito individual del pliego."""
    MEETS = "Meets"
    PARTIALLY_MEETS = "Partially Meets"
    DOES_NOT_MEET = "Does Not Meet"
    NOT_ADDRESSED = "Not Addressed"


class DemoQualityRating(str, Enum):
    """Calificación global de la demo del proveedor."""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class SupplierIdentity(BaseModel):
    """Who submitted the response."""

    response_id: Optional[str] = Field(
        default=None,
        description="Identificador de la respuesta del proveedor."
    )
    supplier_name: str = Field(
        default="",
        description="Nombre del contacto del proveedor."
    )
    supplier_email: str = Field(
        default="",
        description="Email del contacto del proveedor."
    )
    organization: Optional[str] = Field(
        default=None,
        description="Organización del proveedor, si se conoce."
    )


class RequirementCoverageItem(BaseModel):
    requirement: str = Field(description="Texto del requisito evaluado.")
    status: RequirementStatus = Field(description="Nivel de cumplimiento.")
    notes: Optional[str] = None


class RequirementsCoverage(BaseModel):
    """Coverage of the RFP requirements by the response."""

    coverage_percentage: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="Porcentaje global de cobertura (0-100)."
    )
    requirements: List[RequirementCoverageItem] = Field(
        default_factory=list,
        description="Estado requisito por requisito."
    )

    def count_with_status(self, status: RequirementStatus) -> int:
        return sum(1 for item in self.requirements if item.status == status)


class HiddenFeeAlert(BaseModel):
    """Línea de precio no incluida en el costo total declarado."""

    description: str
    severity: Severity = Severity.MEDIUM
    amount: Optional[float] = Field(default=None, allow_inf_nan=False)


class PricingSignal(BaseModel):
    total_cost: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="Costo total declarado por el proveedor."
    )
    estimated_total: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="Total estimado cuando el proveedor no declara uno."
    )
    currency: Optional[str] = None
    hidden_fee_alerts: List[HiddenFeeAlert] = Field(default_factory=list)


class RiskFlag(BaseModel):
    """Riesgo detectado en la respuesta."""

    severity: Severity
    category: str
    description: str = ""
    source: Optional[str] = None
    impact: Optional[str] = None
    mitigation: Optional[str] = None


class DemoSummary(BaseModel):
    key_capabilities: List[str] = Field(default_factory=list)
    gaps: List[str] = Field(default_factory=list)
    overall_quality_rating: Optional[DemoQualityRating] = None


class ComplianceFindings(BaseModel):
    overall_compliance_score: float = Field(
        default=0.0,
        ge=0,
        le=100,
        allow_inf_nan=False,
        description="Score global de compliance (0-100)."
    )
    summary: str = ""


class MandatoryRequirementItem(BaseModel):
    requirement: str
    status: str = ""
    impact: ImpactLevel = ImpactLevel.MEDIUM
    notes: Optional[str] = None


class MandatoryRequirementsStatus(BaseModel):
    """
    Estado de los requisitos obligatorios (must-have).

    Los contadores explícitos tienen prioridad; si faltan se usan
    las longitudes de las listas.
    """

    unmet_mandatory_count: Optional[int] = Field(default=None, ge=0)
    partially_met_mandatory_count: Optional[int] = Field(default=None, ge=0)
    unmet_mandatory_list: List[MandatoryRequirementItem] = Field(default_factory=list)
    partially_met_mandatory_list: List[MandatoryRequirementItem] = Field(default_factory=list)
    overall_mandatory_pass: Optional[bool] = None
    summary: str = ""

    @property
    def unmet_count(self) -> int:
        if self.unmet_mandatory_count is not None:
            return self.unmet_mandatory_count
        return len(self.unmet_mandatory_list)

    @property
    def partial_count(self) -> int:
        if self.partially_met_mandatory_count is not None:
            return self.partially_met_mandatory_count
        return len(self.partially_met_mandatory_list)


class ExtractedSignals(BaseModel):
    """
    Everything the extraction step produced for one supplier response.

    Read-only once built. Any signal may be absent and every consumer
    must treat absence as "no information", never as an error.
    """

    model_config = ConfigDict(frozen=True)

    identity: SupplierIdentity = Field(default_factory=SupplierIdentity)
    requirements_coverage: Optional[RequirementsCoverage] = None
    pricing: Optional[PricingSignal] = None
    technical_claims: Optional[List[str]] = None
    differentiators: Optional[List[str]] = None
    risk_flags: Optional[List[RiskFlag]] = None
    assumptions: Optional[List[str]] = None
    demo_summary: Optional[DemoSummary] = None
    compliance_findings: Optional[ComplianceFindings] = None
    mandatory_status: Optional[MandatoryRequirementsStatus] = None
