"""Catalog vertical — in-memory book CRUD.

Demonstrates the patterns working together in one small domain:
- Pydantic Record model with audit timestamps
- In-memory repository injected via FastAPI Depends
- FastAPI router with domain errors mapped to status codes
- Pure-function validation rules
- Dataclass configuration
"""
