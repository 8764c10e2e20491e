"""
Pydantic schema definitions for API payloads.

Each domain (projects, reports) defines its own Pydantic models for
request and response bodies.  Schemas are separated from the stored
records to decouple API representation from storage.
"""
