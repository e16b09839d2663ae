"""
Infrastructure layer package.

Adapters implementing domain ports against external systems
(currently the relational database).
"""
