"""Domain layer for Canary."""
