#!/usr/bin/env python3
"""Basic usage examples for dotlang."""

import networkx as nx

from dotlang import HTML, GraphRenderer, attr, digraph, edge, from_networkx, graph, node, save, strict


def main():
    """Demonstrate basic dotlang usage."""

    # Example 1: Build a graph with chained method calls
    print("Building a directed graph...")
    g = (
        digraph("pipeline", rankdir="LR")
        .attr("node", shape="box", style="rounded")
        .node("fetch")
        .node("parse", label=HTML("<b>parse</b>"))
        .edge("fetch", "parse", "store", label="ok")
    )
    print(g)

    # Example 2: The same with pipeline operators
    print("Building an undirected graph with | ...")
    u = graph("hello", fontname="sans serif") | attr("edge", color="gray") | node("a") | edge("a", "b")
    print(strict(u))

    # Example 3: Clusters are subgraphs; subgraph() returns the new container
    print("Building clusters...")
    c = digraph("G", compound="true")
    c.subgraph("cluster_0", label="process #1").edge("a0", "a1", "a2")
    c.subgraph("cluster_1", label="process #2").edge("b0", "b1", "b2")
    c.edge("a2", "b0")
    print(c)

    # Example 4: Convert a NetworkX graph
    print("Converting a NetworkX graph...")
    print(from_networkx(nx.cycle_graph(4), "cycle", layout="circo"))

    # Example 5: Render to files with Graphviz (requires the dot executable)
    print("Rendering to output/...")
    save(g, "output/pipeline.svg")
    save(c, "output/clusters.png", output_format="png")

    # Example 6: Render to bytes with a different engine
    svg = GraphRenderer().render_to_bytes(u.source, engine="neato", output_format="svg")
    print(f"Rendered {len(svg)} bytes of SVG")

    print("All examples completed!")


if __name__ == "__main__":
    main()
