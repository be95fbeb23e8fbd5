"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.content import ContentServiceSettings

__all__ = [
    "ContentServiceSettings",
]
