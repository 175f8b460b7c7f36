"""Navigation state machine driving the walk through the location graph."""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..models.command import Command, Direction
from ..models.location import Location
from ..models.outcome import NavigationOutcome, StepResult
from .clue_index import ClueIndex
from .location_graph import LocationGraph


class NavigationSystem:
    """导航系统 - 根据指令在地图中移动，并在进入房间时收集线索"""

    def __init__(self, graph: LocationGraph, clue_index: ClueIndex):
        self.graph = graph
        self.clue_index = clue_index
        self.exited = False
        self.visits: List[str] = []

        # 进入起始房间也算一次访问
        clue = self._enter(graph.current_location)
        self.start_result = StepResult(
            outcome=NavigationOutcome.STARTED,
            location=graph.current_location.name,
            clue=clue,
            message=f"You are in: {graph.current_location.name}",
        )

    @property
    def location(self) -> Optional[Location]:
        """Current location, or None once the player has exited."""
        if self.exited:
            return None
        return self.graph.current_location

    def available_moves(self) -> List[Tuple[Direction, str]]:
        if self.exited:
            return []
        return [
            (direction, child.name)
            for direction, child in self.graph.current_location.exits()
        ]

    def handle(self, command: Command) -> StepResult:
        """
        处理一条指令

        Returns:
            StepResult: 本次指令的结果；任何情况都不会抛出异常
        """
        if self.exited:
            return StepResult(
                outcome=NavigationOutcome.ALREADY_EXITED,
                location=None,
                message="The exploration is already over.",
            )

        here = self.graph.current_location

        if command is Command.QUIT:
            self.exited = True
            return StepResult(
                outcome=NavigationOutcome.EXITED,
                location=None,
                message="You ended the exploration.",
            )

        direction = command.direction
        if direction is None:
            return StepResult(
                outcome=NavigationOutcome.INVALID_COMMAND,
                location=here.name,
                message="Invalid option. Try again.",
            )

        destination = self.graph.descend(direction)
        if destination is None:
            return StepResult(
                outcome=NavigationOutcome.NO_PATH,
                location=here.name,
                message=f"There is no path to the {direction.value}.",
            )

        clue = self._enter(destination)
        return StepResult(
            outcome=NavigationOutcome.MOVED,
            location=destination.name,
            clue=clue,
            message=f"You are in: {destination.name}",
        )

    def _enter(self, location: Location) -> Optional[str]:
        self.visits.append(location.name)
        if not location.has_clue():
            return None
        clue = location.clue_text()
        self.clue_index.insert(clue)
        return clue
