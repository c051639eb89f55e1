"""Configuration layer: grouping models, presets, and logging setup."""
