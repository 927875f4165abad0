"""
Flowchart diagram models.

Node and edge shapes produced by the LLM and consumed by the
client-side flow renderer, plus the laid-out result.

Dependencies: pydantic
System role: Diagram API contracts
"""

from enum import Enum

from pydantic import BaseModel, Field


class DiagramNodeType(str, Enum):
    """Kinds of flowchart nodes."""

    START = "start"
    END = "end"
    PROCESS = "process"
    CONDITION = "condition"
    LOOP = "loop"
    FUNCTION = "function"
    INPUT = "input"
    OUTPUT = "output"


class NodeData(BaseModel):
    """Payload rendered inside a node."""

    label: str = Field(description="The text to display inside the node.")


class DiagramNode(BaseModel):
    """Flowchart node."""

    id: str = Field(description="Unique identifier for the node.")
    type: DiagramNodeType = Field(description="The type of the node.")
    data: NodeData


class DiagramEdge(BaseModel):
    """Directed flowchart edge."""

    id: str = Field(description="Unique identifier for the edge, e.g., 'e1-2'.")
    source: str = Field(description="The ID of the source node.")
    target: str = Field(description="The ID of the target node.")
    label: str | None = Field(
        default=None,
        description="Optional label for the edge (e.g., 'Yes', 'No').",
    )


class Position(BaseModel):
    """Top-left corner of a node in layout coordinates."""

    x: float
    y: float


class PositionedNode(DiagramNode):
    """Flowchart node with layout position."""

    position: Position


class DiagramResult(BaseModel):
    """Laid-out flowchart returned to the client."""

    nodes: list[PositionedNode]
    edges: list[DiagramEdge]
