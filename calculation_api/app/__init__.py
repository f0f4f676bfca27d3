"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings and logging), ``api`` (routers and
dependency providers), ``services`` (the calculation capability) and
``schemas`` (response models).
"""

from .main import app, create_app  # noqa: F401
