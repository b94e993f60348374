"""Domain layer: command models, parsers, and the resolution pipeline.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""
