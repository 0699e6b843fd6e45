"""
Core utilities shared across the mock API.

This package hosts configuration (env vars, data directory), the error types
that routers map to HTTP responses, and logging setup. Services and routers
depend on these primitives instead of reading os.environ directly.
"""
