"""Domain layer: entities, value objects, result envelope and ports."""
