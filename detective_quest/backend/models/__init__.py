"""Data models for the detective quest game."""

from .command import Command, Direction, parse_command
from .location import Location, LocationConfig
from .outcome import AccusationResult, NavigationOutcome, StepResult, Verdict
from .case import CaseFile, SuspectFact

__all__ = [
    # Command
    "Command",
    "Direction",
    "parse_command",
    # Location
    "Location",
    "LocationConfig",
    # Outcome
    "AccusationResult",
    "NavigationOutcome",
    "StepResult",
    "Verdict",
    # Case
    "CaseFile",
    "SuspectFact",
]
