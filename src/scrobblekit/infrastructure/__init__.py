"""Infrastructure layer: HTTP integrations, JSON decoders and logging."""
