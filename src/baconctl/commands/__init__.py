"""Command plumbing for the baconctl CLI.

``_base`` provides the Click command class, ``_context`` the shared
AppContext, and ``loop`` the interactive query loop.
"""
