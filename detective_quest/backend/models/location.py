"""Location data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .command import Direction


@dataclass
class LocationConfig:
    """地点配置（从 YAML 加载）"""
    id: str
    name: str
    clue: str = ""
    left: Optional[str] = None
    right: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LocationConfig:
        """从字典创建 LocationConfig"""
        location_id = data.get("id", "")
        return cls(
            id=location_id,
            name=data.get("name") or location_id,
            clue=(data.get("clue") or "").strip(),
            left=data.get("left"),
            right=data.get("right"),
        )


@dataclass(frozen=True)
class Location:
    """地图中的一个房间；构建完成后不可修改"""
    name: str
    clue: str = ""
    left: Optional[Location] = None
    right: Optional[Location] = None

    def has_clue(self) -> bool:
        return bool(self.clue)

    def clue_text(self) -> str:
        return self.clue

    def child(self, direction: Direction) -> Optional[Location]:
        if direction is Direction.LEFT:
            return self.left
        return self.right

    def exits(self) -> List[Tuple[Direction, Location]]:
        """Children that can be reached from here, left first."""
        result = []
        for direction in (Direction.LEFT, Direction.RIGHT):
            child = self.child(direction)
            if child is not None:
                result.append((direction, child))
        return result

    def is_dead_end(self) -> bool:
        return self.left is None and self.right is None
