"""Data model for DOT graphs: statements, containers and configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, TypeVar, Union

from pydantic import BaseModel

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class Component(str, Enum):
    """Element kinds an attribute statement sets defaults for."""

    GRAPH = "graph"
    NODE = "node"
    EDGE = "edge"

    @classmethod
    def parse(cls, value: Component | str) -> Component:
        """Look up a component by name, rejecting anything unknown."""
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise InvalidArgumentError(
                f"Unknown attribute component {value!r}. "
                f"Expected one of: {', '.join(c.value for c in cls)}",
            ) from None


class CompassPoint(str, Enum):
    """Compass points a port can attach an edge to."""

    N = "n"
    NE = "ne"
    E = "e"
    SE = "se"
    S = "s"
    SW = "sw"
    W = "w"
    NW = "nw"
    C = "c"
    EMPTY = "_"


class Engine(str, Enum):
    """Graphviz layout engines."""

    DOT = "dot"
    NEATO = "neato"
    FDP = "fdp"
    SFDP = "sfdp"
    CIRCO = "circo"
    TWOPI = "twopi"


class OutputFormat(str, Enum):
    """Supported output formats."""

    SVG = "svg"
    PNG = "png"
    PDF = "pdf"
    JPG = "jpg"
    GIF = "gif"


@dataclass(frozen=True)
class HTML:
    """Attribute value holding HTML-like markup.

    Rendered between angle brackets instead of double quotes, e.g.
    ``label=<<b>c</b> | 261.6Hz>``. The markup is emitted verbatim.
    """

    html: str

    def __str__(self) -> str:
        return self.html


AttributeValue = Union[str, HTML]


def _coerce_value(value: Any) -> AttributeValue:
    if isinstance(value, (str, HTML)):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class AttributeList(Mapping[str, AttributeValue]):
    """Attribute assignments attached to one statement, e.g. ``[color="red";]``.

    Keys are unique. Entries are kept sorted by key, so the rendered order
    does not depend on the order keyword arguments were passed in.
    """

    def __init__(self, attributes: Mapping[str, Any] | None = None, **kwargs: Any):
        merged = dict(attributes or {})
        merged.update(kwargs)
        self._content: dict[str, AttributeValue] = {
            str(key): _coerce_value(value)
            for key, value in sorted(merged.items(), key=lambda item: str(item[0]))
        }

    def __getitem__(self, key: str) -> AttributeValue:
        return self._content[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._content)

    def __len__(self) -> int:
        return len(self._content)

    def __repr__(self) -> str:
        return f"AttributeList({self._content!r})"


@dataclass(frozen=True)
class NodeId:
    """Reference to a node, optionally qualified with a port.

    ``port`` is the already formatted suffix, e.g. ``":f0:ne"``. A port given
    without its leading colon gets one.
    """

    name: str
    port: str | None = None

    def __post_init__(self) -> None:
        if self.port == "":
            object.__setattr__(self, "port", None)
        elif self.port is not None and not self.port.startswith(":"):
            object.__setattr__(self, "port", f":{self.port}")

    @classmethod
    def parse(cls, expr: str) -> NodeId:
        """Split ``name[:port[:compass]]`` into a node id.

        Every segment after the name is kept as an opaque suffix; compass
        points are not checked.
        """
        if not isinstance(expr, str):
            raise InvalidArgumentError(
                f"Node id must be a string, got {type(expr).__name__}",
            )
        name, *segments = expr.split(":")
        if not name:
            raise InvalidArgumentError(f"Malformed node id {expr!r}: missing node name")
        port = "".join(f":{segment}" for segment in segments) if segments else None
        return cls(name, port)

    @classmethod
    def from_parts(
        cls,
        name: str,
        port: str | None = None,
        compass: CompassPoint | str | None = None,
    ) -> NodeId:
        """Build a node id from a port name and/or a compass point."""
        segments = []
        if port:
            segments.append(port)
        if compass is not None:
            try:
                segments.append(CompassPoint(compass).value)
            except ValueError:
                raise InvalidArgumentError(f"Unknown compass point {compass!r}") from None
        return cls(name, "".join(f":{s}" for s in segments) or None)


@dataclass(frozen=True)
class NodeStmt:
    """Explicit node declaration."""

    id: NodeId
    attr_list: tuple[AttributeList, ...] = ()


@dataclass(frozen=True)
class EdgeStmt:
    """Edge chain ``source OP targets[0] OP targets[1] ...``."""

    directed: bool
    source: Endpoint
    targets: tuple[Endpoint, ...]
    attr_list: tuple[AttributeList, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "targets", tuple(self.targets))
        if not self.targets:
            raise InvalidArgumentError("edge requires at least one destination")


@dataclass(frozen=True)
class AttrStmt:
    """Default attributes for graphs, nodes or edges within a scope."""

    component: Component
    attr_list: tuple[AttributeList, ...] = ()


@dataclass(frozen=True)
class IdentityStmt:
    """Bare ``key="value"`` assignment inside a graph body."""

    key: str
    value: str


C = TypeVar("C", bound="GraphContainer")
Operation = Callable[["GraphContainer"], "GraphContainer"]


def _endpoint(value: Any) -> Endpoint:
    if isinstance(value, str):
        return NodeId.parse(value)
    if isinstance(value, (NodeId, Subgraph)):
        return value
    raise InvalidArgumentError(
        f"Edge endpoint must be a node id string, NodeId or Subgraph, got {type(value).__name__}",
    )


def edge_endpoints(source: Any, targets: tuple[Any, ...]) -> tuple[Endpoint, tuple[Endpoint, ...]]:
    """Normalise edge endpoints, flattening target sequences.

    Raises:
        InvalidArgumentError: If there is no destination or an endpoint is malformed.
    """
    flat: list[Any] = []
    for target in targets:
        if isinstance(target, (list, tuple)):
            flat.extend(target)
        else:
            flat.append(target)
    if not flat:
        raise InvalidArgumentError("edge requires at least one destination")
    return _endpoint(source), tuple(_endpoint(t) for t in flat)


class GraphContainer:
    """Append-only statement list shared by graphs and subgraphs.

    Every builder method returns the container itself so calls chain left to
    right, except :meth:`subgraph`, which returns the new nested container.
    """

    def __init__(self, name: str | None = None, directed: bool = False):
        self.name = name
        self._directed = directed
        self._statements: list[Statement] = []

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def statements(self) -> tuple[Statement, ...]:
        return tuple(self._statements)

    def append(self: C, statement: Statement) -> C:
        """Append a prebuilt statement."""
        self._statements.append(statement)
        return self

    def node(self: C, id: str, /, port: str | None = None, **attrs: Any) -> C:
        """Declare a node. The node is declared even without attributes.

        ``id`` is positional-only so it can also be passed as a Graphviz attribute.
        """
        return self.append(NodeStmt(NodeId(id, port), (AttributeList(attrs),)))

    def edge(self: C, source: Any, *targets: Any, **attrs: Any) -> C:
        """Add an edge chain from ``source`` through every target.

        Endpoints are ``name[:port[:compass]]`` strings, :class:`NodeId` or
        :class:`Subgraph` objects; sequences of targets are flattened.
        """
        start, ends = edge_endpoints(source, targets)
        return self.append(EdgeStmt(self._directed, start, ends, (AttributeList(attrs),)))

    def attr(self: C, component: Component | str, **attrs: Any) -> C:
        """Set default attributes for ``graph``, ``node`` or ``edge``.

        Without attributes nothing is appended.
        """
        component = Component.parse(component)
        if not attrs:
            return self
        return self.append(AttrStmt(component, (AttributeList(attrs),)))

    def subgraph(self, name: str | None = None, **attrs: Any) -> Subgraph:
        """Create a nested subgraph and return it for further chaining."""
        child = Subgraph(name, directed=self._directed)
        self.append(child)
        logger.debug(f"Created subgraph {name!r} under {self.name!r}")
        return child.attr(Component.GRAPH, **attrs)

    def apply(self, *operations: Operation) -> GraphContainer:
        """Apply builder operations in order and return the final container."""
        container: GraphContainer = self
        for operation in operations:
            container = operation(container)
        return container

    def __or__(self, operation: Operation) -> GraphContainer:
        return operation(self)

    def __str__(self) -> str:
        from ..visualization.dot_generator import render

        return render(self)


class Subgraph(GraphContainer):
    """Nested graph body; also usable as a statement and an edge endpoint."""

    def __repr__(self) -> str:
        return (
            f"Subgraph(name={self.name!r}, directed={self._directed}, "
            f"statements={len(self._statements)})"
        )


class Graph(GraphContainer):
    """Root graph."""

    def __init__(self, name: str | None = None, directed: bool = False, strict: bool = False):
        super().__init__(name, directed)
        self.strict = strict

    def make_strict(self) -> Graph:
        """Forbid multi-edges when rendered."""
        self.strict = True
        return self

    @property
    def source(self) -> str:
        """DOT source of the graph."""
        return str(self)

    def _repr_svg_(self) -> str:
        from ..visualization.renderer import render_svg

        return render_svg(self)

    def _repr_png_(self) -> bytes:
        from ..visualization.renderer import render_png

        return render_png(self)

    def __repr__(self) -> str:
        return (
            f"Graph(name={self.name!r}, directed={self._directed}, strict={self.strict}, "
            f"statements={len(self._statements)})"
        )


Endpoint = Union[NodeId, Subgraph]
Statement = Union[NodeStmt, EdgeStmt, AttrStmt, IdentityStmt, Subgraph]


class RenderConfig(BaseModel):
    """Configuration for serializing and rendering graphs."""

    engine: Engine = Engine.DOT
    output_format: OutputFormat = OutputFormat.SVG
    verbose: bool = False
    escape_quotes: bool = True
