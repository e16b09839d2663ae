"""
Shared error handling package.

Turns domain errors into {"error": ...} JSON responses carrying
the status code each error declares.
"""
