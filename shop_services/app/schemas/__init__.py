"""
Pydantic schema definitions for API payloads.

Each service (cart, orders, products) defines its own models for
request and response bodies.  Schemas are kept apart from the stored
records so the wire format can evolve independently of storage.
"""
