"""Visualization module for DOT generation and rendering."""

from .dot_generator import DOTGenerator, render
from .graph_builder import from_networkx
from .renderer import GraphRenderer, save

__all__ = ["DOTGenerator", "GraphRenderer", "from_networkx", "render", "save"]
