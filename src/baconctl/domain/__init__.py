"""Domain layer — value types and movie-file records.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
