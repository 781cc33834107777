"""
API package containing versioned routes and dependency providers.

A version subpackage such as ``v1`` exposes a top‑level ``router``
which includes all of its endpoints.  ``dependencies`` builds the
service objects injected into route handlers.
"""
