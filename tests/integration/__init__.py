# Integration Tests
"""
Integration tests drive the HTTP API through TestClient against a
seeded temporary database.

Principle: Test behavior, not implementation.
"""
