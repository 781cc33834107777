"""
Version 1 of the API.

This subpackage bundles the product and health endpoints.  Breaking
changes should go into a new version subpackage (e.g. ``v2``).
"""
