"""Outcome models for navigation steps and accusations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class NavigationOutcome(str, Enum):
    """导航结果"""
    STARTED = "started"                  # 进入起始房间
    MOVED = "moved"                      # 成功移动
    NO_PATH = "no_path"                  # 该方向没有路
    INVALID_COMMAND = "invalid_command"  # 无法识别的指令
    EXITED = "exited"                    # 玩家结束探索
    ALREADY_EXITED = "already_exited"    # 探索已结束，不再处理指令


@dataclass
class StepResult:
    """一次导航的结果"""
    outcome: NavigationOutcome
    location: Optional[str]
    clue: Optional[str] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome in (
            NavigationOutcome.STARTED,
            NavigationOutcome.MOVED,
            NavigationOutcome.EXITED,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "location": self.location,
            "clue": self.clue,
            "message": self.message,
            "ok": self.ok,
        }


class Verdict(str, Enum):
    """审判结论"""
    SUFFICIENT = "sufficient"
    INSUFFICIENT = "insufficient"
    REJECTED = "rejected"  # 指控名字无效，未计票


@dataclass
class AccusationResult:
    """指控结果"""
    accused: str
    count: int
    verdict: Verdict
    threshold: int
    supporting_clues: List[str] = field(default_factory=list)
    message: str = ""

    @property
    def sufficient(self) -> bool:
        return self.verdict is Verdict.SUFFICIENT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accused": self.accused,
            "count": self.count,
            "verdict": self.verdict.value,
            "threshold": self.threshold,
            "sufficient": self.sufficient,
            "supporting_clues": list(self.supporting_clues),
            "message": self.message,
        }
