"""
Pydantic schema definitions for API payloads.

Each entity (users, admins, services, requests) defines its own
Pydantic models for request and response bodies.  Schemas are kept
separate from the SQL in ``services`` to decouple the API
representation from persistence.
"""
