"""Farm equipment registry service."""
