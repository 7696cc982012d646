"""Core value types for the play log."""
