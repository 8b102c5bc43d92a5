"""Polygon text editor.

Keeps a ``POLYGON(...)`` text field in sync with a set of interactively
edited polygon rings: a codec converts between rings and the canonical
text, and an edit session re-derives the text after every mutation
reported by a rendering surface.
"""

__version__ = "0.1.0"
