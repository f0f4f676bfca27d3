"""
Top-level package for the Calculation API.

Makes ``calculation_api`` importable with fully qualified names such
as ``calculation_api.app.main``.  All functionality lives in
submodules under ``app``.
"""

__all__ = []
