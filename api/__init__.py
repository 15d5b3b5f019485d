"""
API package - HTTP transport: routers, dependencies and middleware.
"""
