"""Infrastructure layer: external capabilities (DNS)."""
