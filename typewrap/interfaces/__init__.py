"""Reserved keys, type aliases and protocols shared across the package."""
