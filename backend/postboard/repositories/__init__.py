"""Repositories: SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - One repository per entity, constructed per request around an AsyncSession
    - No row caching: every call round-trips to storage
"""
