"""Domain model for the books bounded context."""
