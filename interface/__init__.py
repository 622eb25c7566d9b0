"""Text and HTTP front ends for the Amazons engine."""
