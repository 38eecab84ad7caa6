"""Application layer: per-resource facades and parameter helpers."""
