"""Tests for DOT text generation."""

import pytest

from dotlang import HTML, Subgraph, digraph, edge, graph, node, render
from dotlang.core.models import (
    AttributeList,
    AttrStmt,
    Component,
    IdentityStmt,
    NodeId,
    NodeStmt,
    RenderConfig,
)
from dotlang.visualization.dot_generator import DOTGenerator, escape


def test_render_matches_str():
    """Test render() and str() produce the same text."""
    g = digraph("G") | node("a", color="red") | edge("a", "b")

    assert render(g) == str(g) == g.source


def test_render_is_idempotent():
    """Test rendering twice yields identical text."""
    g = graph("G", rankdir="LR") | node("a") | edge("a", "b", "c")

    assert render(g) == render(g)


def test_render_is_deterministic_for_same_calls():
    """Test independent builds of the same calls are byte-identical."""

    def build():
        return digraph(splines="ortho", bgcolor="white") | node("x", shape="box", color="red") | edge("x", "y")

    assert render(build()) == render(build())


def test_attribute_order_independent_of_keyword_order():
    """Test attributes are emitted in the same order regardless of call order."""
    first = graph() | node("n", b="2", a="1")
    second = graph() | node("n", a="1", b="2")

    assert render(first) == render(second)
    assert '"n"[a="1";b="2";];' in render(first)


def test_empty_graph():
    """Test empty graphs still have a body."""
    assert render(graph()) == "graph {\n}"
    assert render(digraph("G")) == 'digraph "G" {\n}'


def test_html_values_use_angle_brackets():
    """Test HTML values are not quoted or escaped."""
    g = graph() | node("n", label=HTML('<b>x</b> "y"'))

    assert '"n"[label=<<b>x</b> "y">;];' in render(g)


def test_quotes_are_escaped():
    """Test embedded quotes in names and values are escaped."""
    g = graph('my "graph"') | node('say "hi"', label='a "b"')

    assert render(g) == (
        r'graph "my \"graph\"" {' + "\n"
        r'  "say \"hi\""[label="a \"b\"";];' + "\n"
        "}"
    )


def test_already_escaped_quotes_are_kept():
    """Test quotes that are already escaped are not escaped twice."""
    g = graph() | node("n", label=r'a \"b\"')

    assert r'[label="a \"b\"";]' in render(g)


def test_trailing_backslash_does_not_escape_closing_quote():
    """Test a value ending in a single backslash still closes its string."""
    g = graph() | node("n", label="C:\\dir\\")

    assert render(g) == 'graph {\n  "n"[label="C:\\dir\\\\";];\n}'


def test_quote_after_escaped_backslash_is_escaped():
    """Test a quote following an escaped backslash is still escaped."""
    g = graph() | node("n", label='a\\\\"b')

    assert '[label="a\\\\\\"b";]' in render(g)


def test_escape_keeps_other_backslash_sequences():
    """Test line-break escapes such as \\n and \\l pass through."""
    assert escape("left\\lright\\n") == "left\\lright\\n"
    assert escape("a\\\\") == "a\\\\"
    assert escape("a\\\\\\") == "a\\\\\\\\"


def test_quote_escaping_can_be_disabled():
    """Test raw passthrough when escaping is switched off."""
    g = graph() | node("n", label='a "b"')

    assert '[label="a "b"";]' in render(g, escape_quotes=False)


def test_subgraph_rendering_ends_with_newline():
    """Test subgraphs render with a newline after the closing brace."""
    sub = Subgraph("cluster_0", directed=True).node("a")

    assert render(sub) == 'subgraph "cluster_0" {\n  "a";\n}\n'
    assert render(Subgraph()) == "subgraph {\n}\n"


def test_identity_statement():
    """Test bare key=value statements."""
    g = graph().append(IdentityStmt("rankdir", "LR"))

    assert render(g) == 'graph {\n  rankdir="LR";\n}'


def test_attr_statement_always_emits_brackets():
    """Test attribute statements render every list, even an empty one."""
    generator = DOTGenerator()

    assert generator.generate_dot(AttrStmt(Component.NODE, (AttributeList(),))) == "node[]"


def test_node_statement_skips_empty_lists():
    """Test empty attribute lists on nodes contribute nothing."""
    generator = DOTGenerator()
    statement = NodeStmt(NodeId("n"), (AttributeList(), AttributeList(color="red")))

    assert generator.generate_dot(statement) == '"n"[color="red";]'


def test_statement_rendering_with_config():
    """Test the generator honours its configuration."""
    generator = DOTGenerator(RenderConfig(escape_quotes=False))

    assert generator.generate_dot(NodeStmt(NodeId('a"b'))) == '"a"b"'


def test_unknown_statement_rejected():
    """Test rendering something that is not a statement fails."""
    with pytest.raises(TypeError):
        DOTGenerator().generate_dot(object())
