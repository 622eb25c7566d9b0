"""Game of the Amazons engine."""
