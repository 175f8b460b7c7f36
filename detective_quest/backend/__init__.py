"""Backend for the Detective Quest game."""
