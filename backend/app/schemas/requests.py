from typing import Any

from pydantic import BaseModel, Field

from skills.supplier_comparison import EvaluationMatrix
from skills.supplier_signals import ExtractedSignals


class ComparisonRunRequest(BaseModel):
    suppliers: list[ExtractedSignals] = Field(default_factory=list, description="Cohorte a comparar, en orden de envío")
    evaluation_matrix: EvaluationMatrix | None = Field(default=None, description="Matriz del comprador con overrides de pesos")


class ReadinessRunRequest(BaseModel):
    suppliers: list[ExtractedSignals] = Field(default_factory=list)


class CategoryReadinessRequest(BaseModel):
    structured_data: dict[str, Any] = Field(default_factory=dict, description="Respuestas estructuradas del proveedor")
