"""Domain models and code tables."""
