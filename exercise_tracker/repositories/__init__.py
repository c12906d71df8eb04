"""
Repository layer for data access.

Provides data access abstractions following the Repository pattern,
isolating database access from business logic.
"""
