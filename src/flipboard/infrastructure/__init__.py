"""Infrastructure layer — SQLite persistence.

This layer depends on stdlib and SQLAlchemy.
It must never import from domain, services, commands, or output.
The service layer bridges between domain values and stored records.
"""
