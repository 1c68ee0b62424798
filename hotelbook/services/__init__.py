"""Service layer: one module per resource, each taking the request's DB session."""
