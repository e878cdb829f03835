"""Middleware and exception handlers for the gateway."""
