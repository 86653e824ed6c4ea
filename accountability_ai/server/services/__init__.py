"""Request-scoped dependencies wiring services into the API routers."""
