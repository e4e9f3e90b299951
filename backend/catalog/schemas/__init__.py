"""Pydantic Schemas: payload validation for the products endpoint, log sink, and API.

Invariants:
    - Schemas validate at system boundaries
    - Domain enums come from core/domain_types
"""
