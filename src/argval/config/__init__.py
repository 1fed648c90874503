"""Configuration: pydantic models, TOML discovery, settings, logging."""
