"""
Domain types for the JSON store.

* Pydantic models for the default loose schema, validation results and
  HTTP request/response bodies.
* The exception hierarchy raised by the store and the path helpers.
"""
