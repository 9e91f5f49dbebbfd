"""
Core utilities shared across the Jokebook service.

This package hosts:
- configuration helpers (env vars, backend selection)
- cross-cutting pieces such as logging setup and the error types that
  routers convert into JSON payloads.

Repositories, services and routers depend on these primitives instead of
reading os.environ directly.
"""
