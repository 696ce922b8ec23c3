"""
petclinic_customers.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, seed data, and repositories.
"""

# Package marker.
