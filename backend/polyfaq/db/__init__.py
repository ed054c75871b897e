"""Database clients and connections.

Use explicit imports: ``from polyfaq.db.redis import RedisCacheStore``, etc.
"""
