"""Pydantic Schemas: wire shapes for users and posts.

Invariants:
    - Schemas are the records repositories return and routes serialize
    - Field names match the JSON the browser client reads

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
