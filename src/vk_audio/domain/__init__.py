"""Domain layer: API sections and their models."""
