"""
Service layer.

Services encapsulate the business rules of a resource and talk to the
database only through an injected repository, so they can be
exercised against an in‑memory store in tests.
"""
