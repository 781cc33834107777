"""
Top‑level package for the Catalog API.

Marks ``catalog_api`` as a package so that modules within ``app`` can
be imported by their fully qualified names such as
``catalog_api.app.main``.  All functionality lives in submodules
under ``app``.
"""

__all__ = []
