"""Location graph: the fixed binary tree of rooms the player walks through."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Set

from ..models.command import Direction
from ..models.location import Location, LocationConfig


class LocationGraph:
    """地图系统 - 只读的房间二叉树，外加当前所在位置"""

    def __init__(self, root: Location):
        self.root = root
        self._current = root

    @classmethod
    def from_configs(
        cls,
        configs: List[LocationConfig],
        start_id: str,
    ) -> LocationGraph:
        """
        从扁平的地点配置列表构建地图

        Raises:
            ValueError: 配置不能构成一棵以 start_id 为根的树
        """
        by_id: Dict[str, LocationConfig] = {}
        names: Set[str] = set()
        for config in configs:
            if not config.id:
                raise ValueError("Location without an id")
            if config.id in by_id:
                raise ValueError(f"Duplicate location id: {config.id}")
            if config.name in names:
                raise ValueError(f"Duplicate location name: {config.name}")
            names.add(config.name)
            by_id[config.id] = config

        if start_id not in by_id:
            raise ValueError(f"Unknown start location: {start_id}")

        # 每个子节点只能有一个父节点
        parent_of: Dict[str, str] = {}
        for config in by_id.values():
            for child_id in (config.left, config.right):
                if child_id is None:
                    continue
                if child_id not in by_id:
                    raise ValueError(
                        f"Location {config.id} points to unknown location {child_id}"
                    )
                if child_id in parent_of:
                    raise ValueError(
                        f"Location {child_id} is claimed by both "
                        f"{parent_of[child_id]} and {config.id}"
                    )
                parent_of[child_id] = config.id

        if start_id in parent_of:
            raise ValueError(f"Start location {start_id} cannot be a child of {parent_of[start_id]}")

        root = cls._build(start_id, by_id, ancestors=set())
        return cls(root)

    @classmethod
    def _build(
        cls,
        location_id: str,
        by_id: Dict[str, LocationConfig],
        ancestors: Set[str],
    ) -> Location:
        if location_id in ancestors:
            raise ValueError(f"Location {location_id} is its own ancestor")

        config = by_id[location_id]
        path = ancestors | {location_id}
        left = cls._build(config.left, by_id, path) if config.left else None
        right = cls._build(config.right, by_id, path) if config.right else None
        return Location(name=config.name, clue=config.clue, left=left, right=right)

    # ------------------------------------------------------------ navigation
    @property
    def current_location(self) -> Location:
        return self._current

    def descend(self, direction: Direction) -> Optional[Location]:
        """Move to the child in ``direction``; None (and no move) if there is none."""
        child = self._current.child(direction)
        if child is None:
            return None
        self._current = child
        return child

    # ------------------------------------------------------------- queries
    def __iter__(self) -> Iterator[Location]:
        """Pre-order walk over every reachable location."""
        stack = [self.root]
        while stack:
            location = stack.pop()
            yield location
            if location.right is not None:
                stack.append(location.right)
            if location.left is not None:
                stack.append(location.left)

    def __len__(self) -> int:
        return sum(1 for _ in self)
