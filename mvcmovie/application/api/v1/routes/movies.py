"""Movie REST routes.

Read routes return view payloads. Successful submissions answer with a
303 redirect to the movie list.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from mvcmovie.domain.movie.command.create import CreateMovie, CreateMovieHandler
from mvcmovie.domain.movie.command.delete import DeleteMovie, DeleteMovieHandler
from mvcmovie.domain.movie.command.update import EditMovie, EditMovieHandler
from mvcmovie.domain.movie.model.value import MovieForm, MovieId
from mvcmovie.domain.movie.query.forms import (
    CreateForm,
    GetCreateForm,
    GetCreateFormHandler,
    GetDeleteConfirm,
    GetDeleteConfirmHandler,
    GetEditForm,
    GetEditFormHandler,
    MovieView,
)
from mvcmovie.domain.movie.query.get_movie import (
    GetMovieDetail,
    GetMovieDetailHandler,
    MovieDetail,
)
from mvcmovie.domain.movie.query.list_movies import ListMovies, ListMoviesHandler, MovieIndex

router = APIRouter(prefix="/movies", tags=["Movies"], route_class=DishkaRoute)


def _to_index(request: Request) -> RedirectResponse:
    return RedirectResponse(url=request.url_for("list_movies"), status_code=303)


@router.get("", response_model=MovieIndex, name="list_movies")
async def list_movies(
    handler: FromDishka[ListMoviesHandler],
    title: str | None = None,
    genre: str | None = None,
    sort_by_title: bool = False,
) -> MovieIndex:
    return await handler.run(ListMovies(title=title, genre=genre, sort_by_title=sort_by_title))


@router.get("/create", response_model=CreateForm)
async def get_create_form(
    handler: FromDishka[GetCreateFormHandler],
) -> CreateForm:
    return await handler.run(GetCreateForm())


@router.post("/create", status_code=303)
async def create_movie(
    request: Request,
    body: MovieForm,
    handler: FromDishka[CreateMovieHandler],
) -> RedirectResponse:
    await handler.run(CreateMovie(form=body))
    return _to_index(request)


@router.get("/details", response_model=MovieDetail)
@router.get("/details/{movie_id}", response_model=MovieDetail)
async def get_movie_detail(
    handler: FromDishka[GetMovieDetailHandler],
    movie_id: int | None = None,
) -> MovieDetail:
    return await handler.run(GetMovieDetail(id=movie_id))


@router.get("/edit", response_model=MovieView)
@router.get("/edit/{movie_id}", response_model=MovieView)
async def get_edit_form(
    handler: FromDishka[GetEditFormHandler],
    movie_id: int | None = None,
) -> MovieView:
    return await handler.run(GetEditForm(id=movie_id))


@router.post("/edit/{movie_id}", status_code=303)
async def edit_movie(
    request: Request,
    movie_id: int,
    body: MovieForm,
    handler: FromDishka[EditMovieHandler],
) -> RedirectResponse:
    await handler.run(EditMovie(id=MovieId(movie_id), form=body))
    return _to_index(request)


@router.get("/delete", response_model=MovieView)
@router.get("/delete/{movie_id}", response_model=MovieView)
async def get_delete_confirm(
    handler: FromDishka[GetDeleteConfirmHandler],
    movie_id: int | None = None,
) -> MovieView:
    return await handler.run(GetDeleteConfirm(id=movie_id))


@router.post("/delete/{movie_id}", status_code=303)
async def delete_movie(
    request: Request,
    movie_id: int,
    handler: FromDishka[DeleteMovieHandler],
) -> RedirectResponse:
    await handler.run(DeleteMovie(id=MovieId(movie_id)))
    return _to_index(request)
