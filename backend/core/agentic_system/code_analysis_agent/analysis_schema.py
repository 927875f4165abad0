"""
Structured output schemas for code analysis.

The diagram schema is what the model fills in; the explanation and
pseudocode schemas are the API result models themselves.

Dependencies: pydantic, backend.models
System role: Agent response schema definitions
"""

from pydantic import BaseModel, Field

from backend.models.analysis import AnalysisType, ExplanationResult, PseudocodeResult
from backend.models.diagram import DiagramEdge, DiagramNode


class GeneratedDiagram(BaseModel):
    """Flowchart as produced by the model, before layout."""

    nodes: list[DiagramNode] = Field(description="Flowchart nodes.")
    edges: list[DiagramEdge] = Field(description="Directed edges between node ids.")


STRUCTURED_SCHEMAS: dict[AnalysisType, type[BaseModel]] = {
    AnalysisType.DIAGRAM: GeneratedDiagram,
    AnalysisType.NATURAL: ExplanationResult,
    AnalysisType.PSEUDOCODE: PseudocodeResult,
}
