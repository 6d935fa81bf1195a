"""Infrastructure — connection pool, query executor, unit of work, logging.

Invariants:
    - Single async engine per process, owned by DatabasePool
    - All SQLAlchemy exceptions leave this layer as PersistenceError
"""
