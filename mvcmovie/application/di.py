from dishka import AsyncContainer, Provider, make_async_container

from mvcmovie.config import Config
from mvcmovie.domain.movie.util.di import MovieProvider
from mvcmovie.infrastructure.http import HttpProvider
from mvcmovie.infrastructure.persistence import PersistenceProvider
from mvcmovie.util.di.base import ContextProvider
from mvcmovie.util.di.scope import Scope


def create_container(config: Config, *overrides: Provider) -> AsyncContainer:
    """Build the application container.

    Providers in `overrides` are registered last and replace earlier
    registrations of the same type (tests swap adapters this way).
    """
    return make_async_container(
        ContextProvider(),
        PersistenceProvider(),
        HttpProvider(),
        MovieProvider(),
        *overrides,
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
