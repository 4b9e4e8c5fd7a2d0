"""Tutorials API Package: CRUD REST API over the Tutorial resource.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
