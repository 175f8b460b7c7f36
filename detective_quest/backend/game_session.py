"""Game session that owns every structure of one play-through."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .loaders import load_case, load_config
from .models import (
    AccusationResult,
    CaseFile,
    Command,
    StepResult,
    Verdict,
    parse_command,
)
from .systems import (
    ClueIndex,
    LocationGraph,
    NavigationSystem,
    SuspectDirectory,
    VerdictSystem,
)
from .systems.suspect_directory import DEFAULT_BUCKET_COUNT
from .systems.verdict_system import DEFAULT_THRESHOLD


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


class GameSession:
    """游戏会话 - 整合地图、线索索引、嫌疑人目录和审判"""

    def __init__(
        self,
        case: CaseFile,
        config: Optional[Dict[str, Any]] = None,
    ):
        self.config = config or {}
        self.case = case
        self.debug = bool(self.config.get("debug", False)) or _env_flag("DETECTIVE_DEBUG")

        self.graph = LocationGraph.from_configs(case.locations, case.start)
        if len(self.graph) < len(case.locations):
            self._debug(
                f"{len(case.locations) - len(self.graph)} location(s) "
                "are unreachable from the start and were ignored"
            )

        bucket_count = self.config.get("directory", {}).get("bucket_count", DEFAULT_BUCKET_COUNT)
        self.directory = SuspectDirectory(bucket_count=bucket_count)
        self.directory.load(case.facts)

        threshold = self.config.get("verdict", {}).get(
            "corroboration_threshold", DEFAULT_THRESHOLD
        )
        self.verdict_system = VerdictSystem(threshold=threshold)

        self.clue_index = ClueIndex()
        self.navigation = NavigationSystem(self.graph, self.clue_index)
        self.last_accusation: Optional[AccusationResult] = None

        self._debug(
            f"session ready: {len(self.graph)} locations, "
            f"{len(self.directory)} facts, start={self.graph.root.name}"
        )
        self._debug_step(self.navigation.start_result)

    @classmethod
    def from_case(
        cls,
        case_id: Optional[str] = None,
        settings_path: Optional[Path] = None,
    ) -> GameSession:
        """
        根据案件 ID 创建会话

        The case id falls back to ``DETECTIVE_CASE`` and then to
        ``game.default_case`` in config.yaml.
        """
        config = load_config(settings_path)
        case_id = (
            case_id
            or os.getenv("DETECTIVE_CASE")
            or config.get("game", {}).get("default_case", "manor")
        )
        case = load_case(case_id, settings_path)
        return cls(case, config=config)

    # ============================================================
    # 探索
    # ============================================================

    @property
    def start_result(self) -> StepResult:
        return self.navigation.start_result

    @property
    def is_over(self) -> bool:
        return self.navigation.exited

    def apply_command(self, command: Union[Command, str, None]) -> StepResult:
        """Apply one player command, given as a Command or as raw input text."""
        if not isinstance(command, Command):
            command = parse_command(command)
        result = self.navigation.handle(command)
        self._debug_step(result, command)
        return result

    def collected_clues(self) -> List[str]:
        return list(self.clue_index.in_order())

    # ============================================================
    # 审判
    # ============================================================

    def accuse(self, name: Optional[str]) -> AccusationResult:
        """
        Judge an accusation. Accusing ends the exploration if it is still running.

        A blank name is rejected and leaves the session untouched, unless no
        clue was collected at all.
        """
        name = (name or "").strip()
        if not self.navigation.exited and (name or self.clue_index.is_empty):
            self.apply_command(Command.QUIT)

        result = self.verdict_system.judge(self.clue_index, self.directory, name)
        self._debug(f"accuse {result.accused!r}: {result.count} -> {result.verdict.value}")
        if result.verdict is not Verdict.REJECTED:
            self.last_accusation = result
        return result

    def tallies(self) -> Dict[str, int]:
        return self.verdict_system.tally_all(self.clue_index, self.directory)

    # ============================================================
    # 序列化
    # ============================================================

    def snapshot(self) -> Dict[str, Any]:
        location = self.navigation.location
        return {
            "case": {
                "id": self.case.id,
                "title": self.case.title,
                "intro": self.case.intro,
            },
            "exited": self.is_over,
            "location": location.name if location else None,
            "available_moves": [
                {"direction": direction.value, "target": name}
                for direction, name in self.navigation.available_moves()
            ],
            "visits": list(self.navigation.visits),
            "clues": self.collected_clues(),
            "suspects": self.directory.suspects(),
            "threshold": self.verdict_system.threshold,
            "accusation": self.last_accusation.to_dict() if self.last_accusation else None,
        }

    # ------------------------------------------------------------- helpers
    def _debug_step(self, result: StepResult, command: Optional[Command] = None) -> None:
        label = command.value if command else "start"
        line = f"{label} -> {result.outcome.value} @ {result.location}"
        if result.clue:
            line += f" (clue: {result.clue})"
        self._debug(line)

    def _debug(self, msg: str) -> None:
        """Simple debug output"""
        if self.debug:
            print(f"[SESSION][{self.case.id}] {msg}")
