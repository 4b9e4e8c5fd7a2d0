"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - All SQLAlchemy exceptions mapped to DatabaseError before leaving this layer
"""
