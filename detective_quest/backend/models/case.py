"""Case file data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .location import LocationConfig


@dataclass(frozen=True)
class SuspectFact:
    """线索与嫌疑人的对应关系"""
    clue: Optional[str]
    suspect: Optional[str]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SuspectFact:
        return cls(
            clue=data.get("clue") or None,
            suspect=data.get("suspect") or None,
        )


@dataclass
class CaseFile:
    """案件配置（从 YAML 加载）：地图布局 + 线索事实"""
    id: str
    title: str
    start: str
    intro: str = ""
    locations: List[LocationConfig] = field(default_factory=list)
    facts: List[SuspectFact] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], case_id: Optional[str] = None) -> CaseFile:
        """从字典创建 CaseFile"""
        case = data.get("case", {})

        locations = [
            LocationConfig.from_dict(location_data)
            for location_data in data.get("locations", [])
        ]
        facts = [
            SuspectFact.from_dict(fact_data)
            for fact_data in data.get("facts", [])
        ]

        # 未指定起点时使用第一个地点
        start = case.get("start") or (locations[0].id if locations else "")

        return cls(
            id=case.get("id") or case_id or "",
            title=case.get("title", ""),
            start=start,
            intro=(case.get("intro") or "").strip(),
            locations=locations,
            facts=facts,
        )

    def suspects(self) -> List[str]:
        """All suspect names named by at least one fact."""
        return sorted({fact.suspect for fact in self.facts if fact.suspect})
