"""
Application package for the Catalog API.

The service is split into small layers: ``api`` holds the HTTP
routes, ``services`` holds the product business rules,
``repositories`` talks to the database and ``schemas`` defines the
request and response bodies.  ``core`` contains configuration,
logging, database helpers and the error types shared by all layers.
"""
