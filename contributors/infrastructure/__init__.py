"""Infrastructure Layer: external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/
    - Every external failure is mapped to a ContributorsError subclass (core/errors.py)

Design Decisions:
    - Thin adapters over GitPython, fcntl and SQLAlchemy, each satisfying a core Protocol
      or exposing a context manager
"""
