"""Shared utilities — cross-cutting concerns such as logging.

Rules
-----
* No business logic.
* Importable by any layer.
"""
