"""Classic algorithms and data structures: BK-trees, tries, heaps, graphs and number theory."""

__version__ = "0.1.0"