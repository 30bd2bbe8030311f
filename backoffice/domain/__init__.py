"""Domain layer: value objects and exceptions (no framework or infrastructure imports)."""
