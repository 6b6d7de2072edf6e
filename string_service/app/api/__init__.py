"""
HTTP adapter.

This package decodes JSON request bodies into request models, invokes
the endpoints assembled by ``main.create_app`` and encodes their
responses.  It holds no business logic.
"""
