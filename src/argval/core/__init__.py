"""Core layer: argument wrappers, typed facades, aggregation, collector.

This layer depends only on stdlib. It must never import from services,
commands, output, or config. The MX capability is injected; the default
dnspython resolver is only imported lazily when no resolver is given.
"""
