"""Pipeline-style builder functions.

``graph``/``digraph`` create a root graph; ``node``, ``edge`` and ``attr``
return operations that take a container and return the same container, so
they compose with ``|``::

    g = digraph() | node("start", shape="Mdiamond") | edge("start", "a0")
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import InvalidArgumentError
from .models import Component, Graph, GraphContainer, Operation, Subgraph, edge_endpoints

logger = logging.getLogger(__name__)


def _root(name: str | None, directed: bool, attrs: dict[str, Any]) -> Graph:
    g = Graph(name, directed=directed)
    g.attr(Component.GRAPH, **attrs)
    logger.debug(f"Created {'digraph' if directed else 'graph'} {name!r}")
    return g


def graph(name: str | None = None, **attrs: Any) -> Graph:
    """Create an undirected graph. Keyword arguments become graph attributes.

    >>> print(graph("hello", fontname="sans serif", bgcolor="#fff0e0") | edge("a", "b"))
    graph "hello" {
      graph[bgcolor="#fff0e0";fontname="sans serif";];
      "a"--"b";
    }
    """
    return _root(name, False, attrs)


def digraph(name: str | None = None, **attrs: Any) -> Graph:
    """Create a directed graph.

    >>> print(digraph() | edge("a", "b"))
    digraph {
      "a"->"b";
    }
    """
    return _root(name, True, attrs)


def strict(g: Graph) -> Graph:
    """Make a graph strict.

    >>> print(strict(graph()))
    strict graph {
    }
    """
    if not isinstance(g, Graph):
        raise InvalidArgumentError(
            f"Only root graphs can be strict, got {type(g).__name__}",
        )
    return g.make_strict()


def node(id: str, /, port: str | None = None, **attrs: Any) -> Operation:
    """Operation declaring a node.

    >>> print(graph() | node("Node", fillcolor="red", fontcolor="white"))
    graph {
      "Node"[fillcolor="red";fontcolor="white";];
    }
    """
    return lambda container: container.node(id, port, **attrs)


def edge(source: Any, *targets: Any, **attrs: Any) -> Operation:
    """Operation adding an edge chain.

    >>> print(digraph() | edge("a", "b", "c", label="direct!"))
    digraph {
      "a"->"b"->"c"[label="direct!";];
    }
    """
    start, ends = edge_endpoints(source, targets)
    return lambda container: container.edge(start, *ends, **attrs)


def attr(component: Component | str, **attrs: Any) -> Operation:
    """Operation setting default ``graph``, ``node`` or ``edge`` attributes."""
    component = Component.parse(component)
    if not attrs:
        return lambda container: container
    return lambda container: container.attr(component, **attrs)


def subgraph(parent: GraphContainer, name: str | None = None, **attrs: Any) -> Subgraph:
    """Create a subgraph under ``parent`` and return the subgraph."""
    return parent.subgraph(name, **attrs)
