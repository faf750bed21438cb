"""Infrastructure layer — graph store and movie-file loading.

This layer depends on stdlib, the domain value types, and NetworkX.
It must never import from services, commands, or output.
"""
