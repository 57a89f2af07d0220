"""
Service layer.

Each service implements the operations for one entity.  A service
method validates nothing beyond what its schema already enforces,
issues exactly one bounded call against the store handle it is given,
and returns plain data (documents, identifiers or counts).  Mapping
results to HTTP responses is left to the endpoint modules.
"""
