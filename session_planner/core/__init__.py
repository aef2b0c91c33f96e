"""Core domain layer: exception hierarchy and pure scheduling logic."""
