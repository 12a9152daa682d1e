"""Domain layer — entry types, dates, path resolution, and template rendering.

This layer depends only on the stdlib and structlog.
It must never import from services, infrastructure, commands, or config.
"""
