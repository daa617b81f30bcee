"""
Persistence layer.

PostgreSQL-backed association store and trip-room registry, plus the small
storages built on top of them.
"""
