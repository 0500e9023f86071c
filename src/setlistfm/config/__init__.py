"""Configuration package: file locations, TOML settings, and wire constants."""
