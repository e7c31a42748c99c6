"""Domain layer — value type options, items, the manager and the built-in catalog.

This layer depends only on stdlib and pydantic.
It must never import from config, plugins, commands, or output.
"""
