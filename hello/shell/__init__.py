"""Shell Layer - composition root, display consumers and exit-status mapping.

Invariants:
    - The only layer that maps HelloWorldError codes to process exit status
    - Display consumers are registered explicitly (no auto-discovery)
"""
