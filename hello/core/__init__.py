"""Core Layer - value object, observable properties, converters, error taxonomy.

Invariants:
    - No module in core/ imports from services/, shell/, or infrastructure/
    - No IO and no async in core/

Design Decisions:
    - Functional core separated from the imperative shell
"""
