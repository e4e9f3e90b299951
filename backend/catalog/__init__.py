"""Product Catalog Package: interaction controller and HTTP binding for the catalog grid.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
