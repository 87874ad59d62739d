"""Domain layer: launch profiles and the error taxonomy."""
