"""
Exception hierarchy for the String Service.

Two disjoint classes of failure exist:

* Business failures derive from :class:`StringServiceError`.  They are
  part of an operation's contract and endpoints report them as data
  in the response body.
* Everything else (wiring mistakes, metric label misuse, decode errors)
  is an infrastructure failure and propagates to the transport.
"""


class StringServiceError(Exception):
    """Base class for failures that belong to the service contract."""


class EmptyInputError(StringServiceError):
    """Raised by ``uppercase`` when given the empty string."""

    def __init__(self, message: str = "empty string") -> None:
        super().__init__(message)


class EndpointWiringError(TypeError):
    """An endpoint received a request of a type it was not built for."""


class LabelSchemaError(ValueError):
    """Label values passed to a metric do not match its declared schema."""
