"""
API package.

``router`` assembles the routes for the configured profile; the route
handlers themselves live in ``endpoints``.  Handlers obtain the store
through ``deps.get_store`` and never touch module state.
"""
