"""Pydantic Schemas: response models for the read-only API and sync trigger.

Invariants:
    - Schemas validate at system boundary (API responses)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
