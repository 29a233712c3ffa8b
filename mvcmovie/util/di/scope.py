"""Custom Dishka scopes for MvcMovie."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """MvcMovie dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (engine, HTTP client, summary cache)
    - UOW: Unit of Work (one HTTP request, one database session)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
