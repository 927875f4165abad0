"""
Layered auto-layout for generated flowcharts.

Places diagram nodes top-to-bottom in ranks the way a Sugiyama-style
layout engine does: break cycles, assign longest-path ranks, order each
rank by barycenters, then assign coordinates. Graph bookkeeping
(cycle search, topological generations) is delegated to networkx.

Dependencies: networkx, backend.models.diagram
System role: Diagram positioning after LLM generation
"""

import logging
from collections.abc import Sequence

import networkx as nx

from backend.models.diagram import (
    DiagramEdge,
    DiagramNode,
    DiagramResult,
    Position,
    PositionedNode,
)

logger = logging.getLogger(__name__)

NODE_WIDTH = 150
NODE_HEIGHT = 50
NODE_SEP = 50
RANK_SEP = 50
ORDERING_SWEEPS = 4


def build_graph(nodes: Sequence[DiagramNode], edges: Sequence[DiagramEdge]) -> nx.DiGraph:
    """
    Build a directed graph over the diagram's node ids.

    Edges pointing at unknown ids and self-loops do not constrain
    placement and are left out.

    Args:
        nodes: Diagram nodes (first occurrence of an id wins)
        edges: Diagram edges

    Returns:
        nx.DiGraph: Graph with an "order" attribute per node (input position)
    """
    graph = nx.DiGraph()
    for index, node in enumerate(nodes):
        if node.id not in graph:
            graph.add_node(node.id, order=index)

    for edge in edges:
        if edge.source == edge.target:
            continue
        if edge.source not in graph or edge.target not in graph:
            logger.debug("Ignoring dangling edge %s (%s -> %s)", edge.id, edge.source, edge.target)
            continue
        graph.add_edge(edge.source, edge.target)
    return graph


def remove_cycles(graph: nx.DiGraph) -> nx.DiGraph:
    """
    Return an acyclic copy of the graph.

    Depth-first search starts from entry nodes (no incoming edges) in input
    order, so the edges dropped are the ones that jump back to an earlier
    step, i.e. loop back-edges.

    Args:
        graph: Graph built by build_graph

    Returns:
        nx.DiGraph: Copy without back-edges
    """
    acyclic = graph.copy()
    order = nx.get_node_attributes(graph, "order")
    by_order = sorted(graph.nodes, key=order.get)
    roots = [n for n in by_order if graph.in_degree(n) == 0]
    sources = roots + [n for n in by_order if n not in roots]

    while True:
        try:
            cycle = nx.find_cycle(acyclic, source=sources)
        except nx.NetworkXNoCycle:
            return acyclic
        back_source, back_target = cycle[-1][:2]
        acyclic.remove_edge(back_source, back_target)


def rank_layers(dag: nx.DiGraph) -> list[list[str]]:
    """
    Assign longest-path ranks: every node sits one rank below its deepest predecessor.

    Args:
        dag: Acyclic graph

    Returns:
        list[list[str]]: Node ids per rank in input order, top rank first
    """
    order = nx.get_node_attributes(dag, "order")
    return [sorted(generation, key=order.get) for generation in nx.topological_generations(dag)]


def _barycenter(neighbors: list[str], index: dict[str, int]) -> float | None:
    if not neighbors:
        return None
    return sum(index[n] for n in neighbors) / len(neighbors)


def order_ranks(dag: nx.DiGraph, layers: list[list[str]]) -> list[list[str]]:
    """
    Order each rank to reduce edge crossings.

    Starts from input order, then alternates downward sweeps (sort by mean
    position of predecessors) and upward sweeps (mean position of
    successors). Nodes without neighbors on the swept side keep their slot.

    Args:
        dag: Acyclic graph
        layers: Output of rank_layers

    Returns:
        list[list[str]]: Node ids per rank, top rank first
    """
    layers = [list(layer) for layer in layers]

    def sweep(layer_indices: range, neighbors_of) -> None:
        for r in layer_indices:
            index = {n: i for layer in layers for i, n in enumerate(layer)}
            keyed = []
            for slot, node in enumerate(layers[r]):
                center = _barycenter(list(neighbors_of(node)), index)
                keyed.append((slot if center is None else center, slot, node))
            layers[r] = [node for _, _, node in sorted(keyed)]

    for _ in range(ORDERING_SWEEPS):
        sweep(range(1, len(layers)), dag.predecessors)
        sweep(range(len(layers) - 2, -1, -1), dag.successors)

    return layers


def layout_diagram(
    nodes: Sequence[DiagramNode],
    edges: Sequence[DiagramEdge],
    node_width: float = NODE_WIDTH,
    node_height: float = NODE_HEIGHT,
    node_sep: float = NODE_SEP,
    rank_sep: float = RANK_SEP,
) -> DiagramResult:
    """
    Position flowchart nodes top-to-bottom.

    Every node is treated as a node_width x node_height box. Ranks are
    rank_sep apart vertically, boxes in a rank node_sep apart horizontally,
    and each rank is centered under the widest one. Positions are the
    top-left corner of each box.

    Args:
        nodes: Generated nodes, returned in the same order
        edges: Generated edges, returned unchanged
        node_width: Box width
        node_height: Box height
        node_sep: Horizontal gap between boxes of a rank
        rank_sep: Vertical gap between ranks

    Returns:
        DiagramResult: Positioned nodes and the original edges
    """
    if not nodes:
        return DiagramResult(nodes=[], edges=list(edges))

    graph = build_graph(nodes, edges)
    dag = remove_cycles(graph)
    layers = order_ranks(dag, rank_layers(dag))

    def rank_width(count: int) -> float:
        return count * node_width + max(count - 1, 0) * node_sep

    widest = max(rank_width(len(layer)) for layer in layers)
    positions: dict[str, Position] = {}
    for rank, layer in enumerate(layers):
        offset = (widest - rank_width(len(layer))) / 2
        for slot, node_id in enumerate(layer):
            positions[node_id] = Position(
                x=offset + slot * (node_width + node_sep),
                y=rank * (node_height + rank_sep),
            )

    logger.debug(
        "Laid out diagram: nodes=%d edges=%d ranks=%d dropped_back_edges=%d",
        graph.number_of_nodes(), graph.number_of_edges(), len(layers),
        graph.number_of_edges() - dag.number_of_edges(),
    )

    return DiagramResult(
        nodes=[
            PositionedNode(**node.model_dump(), position=positions[node.id])
            for node in nodes
        ],
        edges=list(edges),
    )
