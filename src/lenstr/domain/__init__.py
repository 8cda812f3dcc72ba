"""Domain layer — the immutable string value and its operations.

This layer depends only on the standard library.
It must never import from services, config, output, or commands.
"""
