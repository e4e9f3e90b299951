"""Infrastructure Layer: HTTP-backed collaborators and cross-cutting concerns.

Invariants:
    - All outbound HTTP goes through an injected httpx.AsyncClient
    - Transport failures are mapped to catalog errors or caught and logged
"""
