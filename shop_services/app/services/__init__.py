"""
Service layer abstraction.

Each service encapsulates the logic for one domain.  Cart and order
services receive their ``RecordStore`` in the constructor, so the
in-memory lists used here can be swapped for database-backed stores
without changing API handlers.
"""
