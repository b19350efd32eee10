"""Connection styling for node-graph editors."""

from nodestyle.color import TypeColorAssigner
from nodestyle.style import ConnectionStyle, StyleCollection

__all__ = ["ConnectionStyle", "StyleCollection", "TypeColorAssigner"]
