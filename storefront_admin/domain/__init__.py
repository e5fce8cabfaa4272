"""Domain layer: entities, enums and exceptions (no framework imports)."""
