"""
Core utilities shared across the Blog Manager backend.

This package hosts:
- configuration helpers (env vars, storage paths, backend selection)
- the error hierarchy used by repositories, services and routers
- small helpers (ids, timestamps)

Repositories and services should depend on these primitives instead of
reading os.environ or inventing their own exceptions.
"""
