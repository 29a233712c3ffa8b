"""Main CLI application using Cyclopts."""

import cyclopts

from mvcmovie.cli.commands import db, serve

app = cyclopts.App(
    name="mvcmovie",
    help="MvcMovie - movie catalog server",
)

app.command(serve.serve, name="serve")
app.command(db.app, name="db")


def main() -> None:
    app()
