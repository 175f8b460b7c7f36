"""Configuration loaders for the detective quest game."""

from .yaml_loader import (
    get_settings_path,
    load_config,
    list_cases,
    load_case,
    load_all_settings,
)

__all__ = [
    "get_settings_path",
    "load_config",
    "list_cases",
    "load_case",
    "load_all_settings",
]
