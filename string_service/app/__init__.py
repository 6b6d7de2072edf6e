"""
Application package for the String Service.

The code is organised in layers so that the business capability never
depends on the transport:

* ``services`` holds the service contract, its canonical
  implementation, the service decorators (logging, instrumenting) and
  the per‑operation endpoint constructors.
* ``core`` holds the endpoint machinery, configuration, logging setup,
  metrics and the error hierarchy.
* ``schemas`` holds the request/response models shared by the server
  and the client.
* ``api`` is the HTTP adapter: it decodes requests, invokes endpoints
  and encodes responses.

``main.create_app`` wires everything together.
"""
