"""
Service layer.

``string_service`` defines the service contract and its canonical
implementation.  ``logging_service`` and ``instrumenting_service`` wrap
any service with the same contract, so decorators stack in any order
without touching the business code.  ``endpoints`` binds each service
operation to a transport‑independent endpoint.
"""
