"""
Category Readiness - Data Definitions

Pydantic models for the completeness view of a supplier's
structured answers: per-category coverage, compliance flags and
missing-requirement suggestions.

Author: TenderCortex Team
"""

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field


class ReadinessCategory(str, Enum):
    """Las seis categorías fijas del cuestionario estructurado."""
    FUNCTIONAL = "functional"
    TECHNICAL = "technical"
    INTEGRATION = "integration"
    COMPLIANCE = "compliance"
    SLA = "sla"
    PRICING = "pricing"


class FlagSeverity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RequirementPriority(str, Enum):
    """Prioridad de un requisito faltante en la respuesta."""
    CRITICAL = "critical"
    IMPORTANT = "important"
    OPTIONAL = "optional"


class CategorySpec(BaseModel):
    """
    Definición estática de una categoría.

    ``increments`` lista (campo, puntos): si el campo tiene respuesta
    suma esos puntos a completed_items.
    """

    key: ReadinessCategory
    label: str
    total_items: int = Field(gt=0)
    weight: float = Field(ge=0, le=1)
    increments: Tuple[Tuple[str, int], ...]


class CategoryBreakdown(BaseModel):
    """Cobertura de una categoría."""

    category: str = Field(description="Etiqueta visible de la categoría.")
    key: ReadinessCategory
    completed_items: int = Field(ge=0)
    total_items: int = Field(gt=0)
    percentage: float = Field(ge=0, le=100)
    score: int = Field(ge=0, le=100)
    weight: float = Field(
        ge=0,
        description="Peso en el score global; 0 la excluye del cálculo."
    )


class ComplianceFlag(BaseModel):
    flag_type: str
    severity: FlagSeverity
    message: str
    requirement: str


class MissingRequirement(BaseModel):
    requirement: str
    category: str
    severity: RequirementPriority
    suggested_fix: str = Field(description="Qué debe aportar el proveedor para completarlo.")


class ReadinessBreakdown(BaseModel):
    """Resultado completo del cálculo por categorías."""

    categories: List[CategoryBreakdown] = Field(default_factory=list)
    overall_score: int = Field(ge=0, le=100)
    compliance_flags: List[ComplianceFlag] = Field(default_factory=list)
    missing_requirements: List[MissingRequirement] = Field(default_factory=list)

    def category(self, key: ReadinessCategory) -> CategoryBreakdown:
        return next(c for c in self.categories if c.key == key)

    def flags_with_severity(self, severity: FlagSeverity) -> List[ComplianceFlag]:
        return [f for f in self.compliance_flags if f.severity == severity]
