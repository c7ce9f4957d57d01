"""Classic algorithms and data structures: trees, graphs, flows, number theory and strings."""

__version__ = "0.1.0"