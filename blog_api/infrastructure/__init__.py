# Infrastructure layer - database access
"""
Infrastructure layer contains:
- Database repositories

This layer depends on the database module, not on HTTP routes.
"""
