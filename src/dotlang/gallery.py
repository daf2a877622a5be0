"""Example graphs shipped with dotlang.

Each factory returns a fresh :class:`~dotlang.core.models.Graph`. ``EXAMPLES``
pairs every factory with the Graphviz engine it is meant to be laid out with.
"""

from __future__ import annotations

import logging
from typing import Callable

from .core.builder import attr, digraph, edge, graph, node
from .core.models import HTML, Engine, Graph

logger = logging.getLogger(__name__)

NOTE_NAMES = ["c", "c♯", "d", "d♯", "e", "f", "f♯", "g", "g♯", "a", "a♯", "b"]
A_FREQUENCY = 440.0


def readme_example() -> Graph:
    """Two wedged nodes joined by a labelled edge."""
    return (
        digraph(bgcolor="beige", rankdir="LR", ranksep="1")
        .attr("edge", fontname="Cantarell")
        .attr("node", shape="circle", style="filled,wedged")
        .node("start", label="", fillcolor="red:green:blue")
        .node("end", label="", fillcolor="cyan:magenta:yellow")
        .edge("start", "end", label="invert!")
    )


def clusters() -> Graph:
    """The classic Graphviz two-cluster process diagram."""
    g = digraph("G")
    g.subgraph("cluster_0", label="process #1", style="filled", color="lightgray").apply(
        attr("node", style="filled", color="white"),
        edge(*(f"a{i}" for i in range(4))),
    )
    g.subgraph("cluster_1", label="process #2", color="blue").apply(
        attr("node", style="filled"),
        edge(*(f"b{i}" for i in range(4))),
    )
    return g.apply(
        edge("start", "a0"),
        edge("start", "b0"),
        edge("a1", "b3"),
        edge("b2", "a3"),
        edge("a3", "a0"),
        edge("a3", "end"),
        edge("b3", "end"),
        node("start", shape="Mdiamond"),
        node("end", shape="Msquare"),
    )


def konigsberg() -> Graph:
    """The seven bridges of Königsberg as an undirected multigraph."""
    return (
        graph(layout="neato")
        | attr("node", shape="tripleoctagon", style="rounded,filled",
               fillcolor="darkolivegreen4", fontcolor="white")
        | attr("edge", len="1.4", penwidth="3")
        | node("North", label="Altstadt", pos="0,1", width="2", height="0.7")
        | node("South", label="Vorstadt", pos="0,-1", width="2", height="0.7")
        | node("Center", label="Kneiphof", pos="1,0")
        | node("East", label="Lomse", pos="2,0", height="1")
        | edge("East", "South", "Center", "North")
        | edge("East", "North", "Center", "South")
        | edge("Center", "East")
    )


def equal_tempered(note: str) -> float:
    """Frequency of ``note`` in 12 tone equal temperament, tuned to A440."""
    steps = NOTE_NAMES.index(note) - NOTE_NAMES.index("a")
    return A_FREQUENCY * 2 ** (steps / 12)


def circle_of_fifths() -> Graph:
    """Circle of fifths with HTML record labels showing each frequency."""
    g = (
        digraph(label="The Circle of Fifths and 12 tone equal temperament",
                layout="neato", start="regular", rankdir="LR")
        .attr("node", shape="record", style="rounded")
        .attr("edge", len="1.2")
    )
    for i, note in enumerate(NOTE_NAMES):
        label = HTML(f"<b>{note}</b> | {equal_tempered(note):4.1f}Hz")
        g.node(note, label=label).edge(note, NOTE_NAMES[(i + 7) % 12])
    return g


# After an example by Costa Shulyupin
TWELVE_COLORS = {
    "orange": [],
    "deeppink": [],
    "purple": [],
    "deepskyblue": [],
    "springgreen": [],
    "yellowgreen": [],
    "yellow": ["yellowgreen", "orange"],
    "red": ["orange", "yellow", "white", "magenta", "deeppink"],
    "magenta": ["purple", "deeppink"],
    "blue": ["deepskyblue", "cyan", "white", "magenta", "purple"],
    "cyan": ["springgreen", "deepskyblue"],
    "green": ["yellowgreen", "yellow", "white", "cyan", "springgreen"],
    "white": [],
}
WHITE_TEXT = {"blue", "green", "purple", "red", "magenta", "deeppink"}


def twelve_colors() -> Graph:
    """Additive and subtractive color mixing wheel."""
    g = (
        digraph("Twelve_colors", layout="neato", normalize="0", start="regular")
        .attr("node", shape="circle", style="filled", width="1.5")
        .attr("edge", len="2")
    )
    for color, mixes in TWELVE_COLORS.items():
        g.node(color, fillcolor=color, fontcolor="white" if color in WHITE_TEXT else "black")
        for other in mixes:
            g.edge(color, other)
    return g


EXAMPLES: dict[str, tuple[Callable[[], Graph], Engine]] = {
    "readme-example": (readme_example, Engine.DOT),
    "clusters": (clusters, Engine.DOT),
    "konigsberg": (konigsberg, Engine.NEATO),
    "circle-of-fifths": (circle_of_fifths, Engine.NEATO),
    "twelve-colors": (twelve_colors, Engine.NEATO),
}


def build_example(name: str) -> Graph:
    """Build the example graph registered under ``name``."""
    try:
        factory, _ = EXAMPLES[name]
    except KeyError:
        raise KeyError(
            f"Unknown example {name!r}. Available: {', '.join(EXAMPLES)}",
        ) from None
    logger.debug(f"Building example {name}")
    return factory()
