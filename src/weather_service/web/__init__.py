# ABOUTME: FastAPI web layer: application factory, routes, dependencies and error handlers.
