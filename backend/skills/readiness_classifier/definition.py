"""
Readiness Classifier - Data Definitions

Pydantic models for the three-tier supplier readiness verdict.

Author: TenderCortex Team
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class ReadinessIndicator(str, Enum):
    """
    Veredicto de preparación del proveedor.

    - READY: Seleccionable sin condiciones relevantes.
    - CONDITIONAL: Seleccionable si se resuelven los puntos abiertos.
    - NOT_READY: No seleccionable en su estado actual.
    """
    READY = "READY"
    CONDITIONAL = "CONDITIONAL"
    NOT_READY = "NOT_READY"

    @property
    def label(self) -> str:
        return {
            ReadinessIndicator.READY: "Ready",
            ReadinessIndicator.CONDITIONAL: "Conditional",
            ReadinessIndicator.NOT_READY: "Not Ready",
        }[self]


class ReadinessAnalysis(BaseModel):
    """
    Resultado completo de la clasificación de un proveedor.

    El score es siempre 0-100 aunque las deducciones intermedias
    lo lleven por debajo de cero.
    """

    indicator: ReadinessIndicator = Field(
        ...,
        description="Veredicto: READY, CONDITIONAL, NOT_READY."
    )

    score: int = Field(
        ...,
        ge=0,
        le=100,
        description="Score de preparación (0-100)."
    )

    rationale: str = Field(
        default="",
        description="Explicación en prosa del veredicto y sus causas."
    )

    critical_issues: List[str] = Field(
        default_factory=list,
        description="Problemas que bloquean la selección."
    )

    conditional_factors: List[str] = Field(
        default_factory=list,
        description="Puntos a resolver antes de seleccionar."
    )

    strengths: List[str] = Field(
        default_factory=list,
        description="Fortalezas detectadas."
    )

    def get_traffic_light(self) -> str:
        """Retorna el emoji de semáforo según el veredicto."""
        return {
            ReadinessIndicator.READY: "🟢",
            ReadinessIndicator.CONDITIONAL: "🟡",
            ReadinessIndicator.NOT_READY: "🔴",
        }[self.indicator]

    def to_summary(self) -> str:
        """Genera un resumen ejecutivo de una línea."""
        return (
            f"{self.get_traffic_light()} {self.indicator.label} | "
            f"Score: {self.score}/100 | "
            f"Critical: {len(self.critical_issues)} | "
            f"Conditional: {len(self.conditional_factors)}"
        )

    def to_report(self) -> str:
        """Genera un reporte detallado en Markdown."""
        lines = [
            "## Supplier Readiness",
            "",
            f"**Indicator**: {self.indicator.label} {self.get_traffic_light()}",
            f"**Score**: {self.score}/100",
            f"**Rationale**: {self.rationale}",
            "",
        ]

        sections = [
            ("### Critical Issues", "🔴", self.critical_issues),
            ("### Conditional Factors", "🟡", self.conditional_factors),
            ("### Strengths", "🟢", self.strengths),
        ]
        for title, marker, items in sections:
            if not items:
                continue
            lines.append(title)
            lines.append("")
            for item in items:
                lines.append(f"- {marker} {item}")
            lines.append("")

        return "\n".join(lines).rstrip() + "\n"
