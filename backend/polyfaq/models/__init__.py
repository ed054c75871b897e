"""SQLAlchemy ORM models.

All models are imported here so Database.create_all() registers them
on Base.metadata before creating tables.
"""

from polyfaq.models.faq import FAQ

__all__ = [
    "FAQ",
]
