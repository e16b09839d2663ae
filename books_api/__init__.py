"""
Books API: CRUD service for book records.

Application package root. This is a small monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - books: Book catalogue (list, filter by author, create, update, delete).

Layers:
    - domain: Entities, ports (ABCs), errors, price rules.
    - application: Service, DTOs, mapper.
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
