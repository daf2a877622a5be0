"""Graph building from NetworkX graphs."""

import logging
from typing import Any, Optional

import networkx as nx

from ..core.models import AttributeList, Component, EdgeStmt, Graph, NodeId, NodeStmt

logger = logging.getLogger(__name__)


def from_networkx(nx_graph: nx.Graph, name: Optional[str] = None, **graph_attrs: Any) -> Graph:
    """Build a DOT graph from a NetworkX graph.

    Node data and edge data dictionaries become statement attributes. Node
    keys are converted with ``str()`` and used verbatim, so a key containing
    ``:`` is not split into a port. Parallel edges of multigraphs are kept.

    Args:
        nx_graph: Any NetworkX graph, directed or not.
        name: Graph name. Defaults to ``nx_graph.name`` when it is set.
        **graph_attrs: Graph-level attributes. They are merged over
            ``nx_graph.graph`` (without its ``name`` entry) and win on clashes.

    Returns:
        A root graph with one node statement per node and one edge statement
        per edge, in NetworkX iteration order.
    """
    directed = nx_graph.is_directed()
    graph = Graph(name if name is not None else (nx_graph.name or None), directed=directed)
    attrs = {key: value for key, value in nx_graph.graph.items() if key != "name"}
    attrs.update(graph_attrs)
    graph.attr(Component.GRAPH, **attrs)

    for node, data in nx_graph.nodes(data=True):
        graph.append(NodeStmt(NodeId(str(node)), (AttributeList(data),)))

    for u, v, data in nx_graph.edges(data=True):
        graph.append(
            EdgeStmt(directed, NodeId(str(u)), (NodeId(str(v)),), (AttributeList(data),))
        )

    logger.info(
        f"Converted NetworkX graph with {nx_graph.number_of_nodes()} nodes and "
        f"{nx_graph.number_of_edges()} edges",
    )
    return graph
