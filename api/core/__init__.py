"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, settings, logging, error responses). Keep feature-specific SQL and
shaping logic in the corresponding feature package (e.g. `invoices/`).
"""
