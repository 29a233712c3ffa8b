"""Provider base class and values supplied to the container as context."""

from dishka import Provider as DishkaProvider
from dishka import from_context
from starlette.requests import Request

from mvcmovie.config import Config
from mvcmovie.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for all MvcMovie DI providers."""


class ContextProvider(Provider):
    """Objects handed to the container instead of built by it."""

    config = from_context(provides=Config, scope=Scope.APP)
    request = from_context(provides=Request, scope=Scope.UOW)
