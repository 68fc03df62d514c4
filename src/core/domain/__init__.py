"""Domain models and value types.

Why:
- Pure, strict data structures (Pydantic v2) for orders, drivers and vehicles.
- The domain knows nothing about the terminal, colors or prompting.
"""
