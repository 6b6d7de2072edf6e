"""
Pydantic schema definitions for API payloads.

The models are shared by the HTTP adapter, the endpoints and the
client so that every layer agrees on the wire format.
"""
