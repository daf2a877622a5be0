"""Core DOT data model and builder."""

from .builder import attr, digraph, edge, graph, node, strict, subgraph
from .errors import InvalidArgumentError, RenderError
from .models import (
    HTML,
    AttrStmt,
    AttributeList,
    CompassPoint,
    Component,
    EdgeStmt,
    Engine,
    Graph,
    GraphContainer,
    IdentityStmt,
    NodeId,
    NodeStmt,
    OutputFormat,
    RenderConfig,
    Statement,
    Subgraph,
)

__all__ = [
    "HTML",
    "AttrStmt",
    "AttributeList",
    "CompassPoint",
    "Component",
    "EdgeStmt",
    "Engine",
    "Graph",
    "GraphContainer",
    "IdentityStmt",
    "InvalidArgumentError",
    "NodeId",
    "NodeStmt",
    "OutputFormat",
    "RenderConfig",
    "RenderError",
    "Statement",
    "Subgraph",
    "attr",
    "digraph",
    "edge",
    "graph",
    "node",
    "strict",
    "subgraph",
]
