"""dotlang - build Graphviz DOT graphs in Python.

Create graphs with composable builder calls and render them to DOT text
or, through Graphviz, to images.
"""

from .core import (
    HTML,
    CompassPoint,
    Component,
    Engine,
    Graph,
    InvalidArgumentError,
    NodeId,
    OutputFormat,
    RenderConfig,
    RenderError,
    Subgraph,
    attr,
    digraph,
    edge,
    graph,
    node,
    strict,
    subgraph,
)
from .visualization import DOTGenerator, GraphRenderer, from_networkx, render, save

__version__ = "0.3.0"
__all__ = [
    "HTML",
    "CompassPoint",
    "Component",
    "DOTGenerator",
    "Engine",
    "Graph",
    "GraphRenderer",
    "InvalidArgumentError",
    "NodeId",
    "OutputFormat",
    "RenderConfig",
    "RenderError",
    "Subgraph",
    "attr",
    "digraph",
    "edge",
    "from_networkx",
    "graph",
    "node",
    "render",
    "save",
    "strict",
    "subgraph",
]
