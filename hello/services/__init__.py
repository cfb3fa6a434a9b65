"""Services Layer - async lookup service and the bounded property-name retrieval.

Invariants:
    - Services are constructed explicitly and injected; no module-level instances
"""
