"""DOT language generation for Graphviz rendering."""

import logging
import re
from typing import Optional, Union

from ..core.models import (
    HTML,
    AttributeList,
    AttrStmt,
    EdgeStmt,
    Graph,
    GraphContainer,
    IdentityStmt,
    NodeId,
    NodeStmt,
    RenderConfig,
    Subgraph,
)

logger = logging.getLogger(__name__)

INDENT = "  "
_QUOTE = re.compile(r'(\\*)"')
_TRAILING_BACKSLASHES = re.compile(r'(\\+)\Z')


def _escape_quote(match: re.Match) -> str:
    backslashes = match.group(1)
    if len(backslashes) % 2:
        return match.group(0)
    return backslashes + '\\"'


def _escape_trailing(match: re.Match) -> str:
    backslashes = match.group(1)
    return backslashes + '\\' if len(backslashes) % 2 else backslashes


def escape(text: str) -> str:
    """Escape ``text`` for use inside a double-quoted DOT string.

    A quote preceded by an even number of backslashes gets one more, and an
    odd run of backslashes at the end is evened out so it cannot swallow the
    closing quote. Other escapes such as ``\\n`` or ``\\l`` are left alone.
    """
    text = _QUOTE.sub(_escape_quote, text)
    return _TRAILING_BACKSLASHES.sub(_escape_trailing, text)


class DOTGenerator:
    """Generates DOT language text from graphs built with dotlang."""

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize DOT generator with configuration.

        Args:
            config: Render configuration. Only ``escape_quotes`` is used here:
                when set, embedded double quotes in names and plain attribute
                values are written as ``\\"``. HTML values are never escaped.
        """
        self.config = config or RenderConfig()

    def generate_dot(
        self,
        target: Union[GraphContainer, NodeStmt, EdgeStmt, AttrStmt, IdentityStmt],
    ) -> str:
        """Generate DOT text for a graph, subgraph or single statement.

        Args:
            target: Root graph, subgraph or statement.

        Returns:
            DOT language string. A root graph ends with its closing brace;
            a subgraph ends with a newline after its closing brace.
        """
        if isinstance(target, Graph):
            logger.debug(f"Generating DOT for graph {target.name!r}")
            return self._generate_graph(target)
        return self._generate_statement(target)

    def _generate_graph(self, graph: Graph) -> str:
        tokens = []
        if graph.strict:
            tokens.append("strict")
        tokens.append("digraph" if graph.directed else "graph")
        if graph.name is not None:
            tokens.append(self._quote(graph.name))
        tokens.append("{\n")
        return " ".join(tokens) + self._generate_body(graph) + "}"

    def _generate_subgraph(self, subgraph: Subgraph) -> str:
        tokens = ["subgraph"]
        if subgraph.name is not None:
            tokens.append(self._quote(subgraph.name))
        tokens.append("{\n")
        return " ".join(tokens) + self._generate_body(subgraph) + "}\n"

    def _generate_body(self, container: GraphContainer) -> str:
        return "".join(
            f"{INDENT}{self._generate_statement(statement)};\n"
            for statement in container.statements
        )

    def _generate_statement(self, statement) -> str:
        """Render one statement; dispatch covers every statement variant."""
        if isinstance(statement, NodeStmt):
            return self._generate_node_id(statement.id) + self._generate_attr_lists(
                statement.attr_list, skip_empty=True,
            )
        if isinstance(statement, EdgeStmt):
            op = "->" if statement.directed else "--"
            parts = [self._generate_endpoint(statement.source)]
            for target in statement.targets:
                parts.append(op + self._generate_endpoint(target))
            return "".join(parts) + self._generate_attr_lists(statement.attr_list, skip_empty=True)
        if isinstance(statement, AttrStmt):
            return statement.component.value + self._generate_attr_lists(
                statement.attr_list, skip_empty=False,
            )
        if isinstance(statement, IdentityStmt):
            return f"{statement.key}={self._quote(statement.value)}"
        if isinstance(statement, Subgraph):
            return self._generate_subgraph(statement)
        raise TypeError(f"Cannot render {type(statement).__name__} as a DOT statement")

    def _generate_endpoint(self, endpoint: Union[NodeId, Subgraph]) -> str:
        if isinstance(endpoint, Subgraph):
            return self._generate_subgraph(endpoint)
        return self._generate_node_id(endpoint)

    def _generate_node_id(self, node_id: NodeId) -> str:
        return self._quote(node_id.name) + (node_id.port or "")

    def _generate_attr_lists(self, attr_lists, skip_empty: bool) -> str:
        return "".join(
            f"[{self._generate_attr_list(alist)}]"
            for alist in attr_lists
            if alist or not skip_empty
        )

    def _generate_attr_list(self, alist: AttributeList) -> str:
        return "".join(f"{key}={self._format_value(value)};" for key, value in alist.items())

    def _format_value(self, value) -> str:
        if isinstance(value, HTML):
            return f"<{value.html}>"
        return self._quote(value)

    def _quote(self, text: str) -> str:
        if self.config.escape_quotes:
            text = escape(text)
        return f'"{text}"'


def render(target: GraphContainer, escape_quotes: bool = True) -> str:
    """Render a graph or subgraph to DOT text."""
    return DOTGenerator(RenderConfig(escape_quotes=escape_quotes)).generate_dot(target)
