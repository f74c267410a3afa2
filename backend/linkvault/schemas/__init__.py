"""Pydantic Schemas — request/response contracts for API endpoints.

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - camelCase on the wire, snake_case in Python (alias_generator=to_camel)
"""
