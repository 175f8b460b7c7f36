"""YAML configuration loader for game settings and case files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..models.case import CaseFile


def get_settings_path() -> Path:
    """Get the path to the settings directory."""
    override = os.getenv("DETECTIVE_SETTINGS_DIR")
    if override:
        return Path(override)
    # 从 backend/loaders/ 向上两级到 detective_quest，再进入 settings
    current_file = Path(__file__)
    backend_dir = current_file.parent.parent
    package_dir = backend_dir.parent
    return package_dir / "settings"


def load_yaml_file(filepath: Path) -> Dict[str, Any]:
    """Load a single YAML file."""
    with open(filepath, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the main game configuration."""
    settings_path = settings_path or get_settings_path()
    config_file = settings_path / "config.yaml"
    if config_file.exists():
        return load_yaml_file(config_file)
    return {}


def _case_files(settings_path: Path) -> Dict[str, Path]:
    cases_dir = settings_path / "cases"
    files: Dict[str, Path] = {}
    if not cases_dir.exists():
        return files
    for pattern in ("*.yaml", "*.yml"):
        for filepath in sorted(cases_dir.glob(pattern)):
            files.setdefault(filepath.stem, filepath)
    return files


def list_cases(settings_path: Optional[Path] = None) -> List[Dict[str, str]]:
    """List the available cases as ``{"id", "title"}`` dicts, sorted by id."""
    settings_path = settings_path or get_settings_path()
    cases = []
    for case_id, filepath in sorted(_case_files(settings_path).items()):
        case = load_yaml_file(filepath).get("case", {})
        cases.append({
            "id": case.get("id") or case_id,
            "title": case.get("title", case_id),
        })
    return cases


def load_case(case_id: str, settings_path: Optional[Path] = None) -> CaseFile:
    """
    Load one case file by id.

    Raises:
        FileNotFoundError: no case file with that id exists
    """
    settings_path = settings_path or get_settings_path()
    filepath = _case_files(settings_path).get(case_id)
    if filepath is None:
        raise FileNotFoundError(f"Unknown case: {case_id}")
    return CaseFile.from_dict(load_yaml_file(filepath), case_id=case_id)


def load_all_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the config and the list of cases at once."""
    settings_path = settings_path or get_settings_path()
    return {
        "config": load_config(settings_path),
        "cases": list_cases(settings_path),
    }


if __name__ == "__main__":
    # 测试加载
    settings = load_all_settings()
    print(f"Loaded config: {settings['config'].get('game', {}).get('title', 'N/A')}")
    for info in settings["cases"]:
        case = load_case(info["id"])
        print(f"Loaded case {case.id}: {len(case.locations)} locations, {len(case.facts)} facts")
