"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON, except DELETE /posts/{id} success (204, empty)

Design Decisions:
    - Thin routes: validate with core/validate_input.py, delegate to repositories
"""
