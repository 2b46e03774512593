"""
Endpoint modules.

Each module exposes either a module level ``router`` or, where routes
depend on the configured profile, a ``create_router(profile)`` factory.
"""
