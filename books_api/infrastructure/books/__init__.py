"""
Infrastructure adapters for the books bounded context.

Each adapter implements a domain port (ABC) and connects
to external systems.
"""
