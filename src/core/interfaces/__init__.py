"""Core interfaces.

Why:
- Contracts (Protocol) implemented by concrete adapters.
- The CLI depends on the abstraction, tests plug in a recording double.
"""
