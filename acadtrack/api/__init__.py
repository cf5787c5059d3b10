"""HTTP API: routers and exception handlers."""
