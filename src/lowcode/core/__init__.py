"""Core decision logic and cross-cutting concerns."""
