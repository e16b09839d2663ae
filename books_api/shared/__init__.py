"""
Shared cross-cutting concerns.

Error translation, logging setup and security middleware used
by every layer of the application.
"""
