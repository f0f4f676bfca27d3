"""
API package containing the HTTP routes.

``router`` in ``router.py`` includes every endpoint module and is
mounted by ``create_app``.
"""
