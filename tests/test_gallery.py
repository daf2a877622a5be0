"""Tests for the bundled example graphs."""

import pytest

from dotlang import Graph, render
from dotlang.gallery import (
    EXAMPLES,
    build_example,
    circle_of_fifths,
    clusters,
    equal_tempered,
    konigsberg,
    readme_example,
    twelve_colors,
)


@pytest.mark.parametrize("name", list(EXAMPLES))
def test_examples_build(name):
    """Test every registered example builds a graph."""
    g = build_example(name)

    assert isinstance(g, Graph)
    assert render(g) == render(build_example(name))


def test_unknown_example():
    """Test unknown example names list the available ones."""
    with pytest.raises(KeyError, match="clusters"):
        build_example("missing")


def test_readme_example():
    """Test the readme example renders exactly."""
    assert render(readme_example()) == (
        'digraph {\n'
        '  graph[bgcolor="beige";rankdir="LR";ranksep="1";];\n'
        '  edge[fontname="Cantarell";];\n'
        '  node[shape="circle";style="filled,wedged";];\n'
        '  "start"[fillcolor="red:green:blue";label="";];\n'
        '  "end"[fillcolor="cyan:magenta:yellow";label="";];\n'
        '  "start"->"end"[label="invert!";];\n'
        '}'
    )


def test_clusters():
    """Test the clusters example nests both clusters under the root."""
    text = render(clusters())

    assert text.startswith('digraph "G" {\n  subgraph "cluster_0" {\n')
    assert '  graph[color="lightgray";label="process #1";style="filled";];\n' in text
    assert '  "a0"->"a1"->"a2"->"a3";\n' in text
    assert '  "b0"->"b1"->"b2"->"b3";\n' in text
    assert '  "start"[shape="Mdiamond";];\n' in text
    assert text.endswith('  "end"[shape="Msquare";];\n}')


def test_konigsberg():
    """Test the Königsberg bridges are undirected."""
    text = render(konigsberg())

    assert text.startswith('graph {\n  graph[layout="neato";];\n')
    assert (
        '  node[fillcolor="darkolivegreen4";fontcolor="white";'
        'shape="tripleoctagon";style="rounded,filled";];\n'
    ) in text
    assert '  "East"--"South"--"Center"--"North";\n' in text
    assert "->" not in text


def test_equal_tempered():
    """Test equal temperament frequencies relative to A440."""
    assert equal_tempered("a") == 440.0
    assert equal_tempered("c") == pytest.approx(261.63, abs=0.01)
    assert equal_tempered("b") == pytest.approx(493.88, abs=0.01)


def test_circle_of_fifths():
    """Test HTML labels and fifth steps."""
    text = render(circle_of_fifths())

    assert '  "a"[label=<<b>a</b> | 440.0Hz>;];\n' in text
    assert '  "c"->"g";\n' in text
    assert '  "f"->"c";\n' in text


def test_twelve_colors():
    """Test text color follows the fill color."""
    text = render(twelve_colors())

    assert '  "blue"[fillcolor="blue";fontcolor="white";];\n' in text
    assert '  "yellow"[fillcolor="yellow";fontcolor="black";];\n' in text
    assert '  "red"->"orange";\n' in text
