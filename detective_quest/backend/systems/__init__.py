"""Game systems for the detective quest game."""

from .location_graph import LocationGraph
from .clue_index import ClueIndex, ClueNode
from .suspect_directory import SuspectDirectory, djb2
from .navigation_system import NavigationSystem
from .verdict_system import VerdictSystem

__all__ = [
    "LocationGraph",
    "ClueIndex",
    "ClueNode",
    "SuspectDirectory",
    "djb2",
    "NavigationSystem",
    "VerdictSystem",
]
