"""Domain layer — rules, result models, validation and JSON helpers.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
