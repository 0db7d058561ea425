"""Storage package - Geo Store access."""
