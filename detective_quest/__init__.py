"""Detective Quest - explore the mansion, collect clues, accuse a suspect."""

__version__ = "0.1.0"
