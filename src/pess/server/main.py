"""
PESS API Server.

  uvicorn pess.server.main:app --reload
"""

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from rich.console import Console
from rich.table import Table

from pess.core.lexicon import Category, Lexicon, RedisLexicon, default_lexicon
from pess.server.deps import get_lexicon
from pess.server.routes import grammar, vocab

VERSION = "0.1.0"

# Local front-end dev servers.
ALLOWED_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]

console = Console()


def describe_lexicon(lexicon: Lexicon) -> dict:
    """Backend name and word count per category."""
    if isinstance(lexicon, RedisLexicon):
        backend = f"redis db={lexicon.client.connection_pool.connection_kwargs.get('db', 0)}"
    else:
        backend = "memory"
    return {
        "backend": backend,
        "words": {c.keyword: len(lexicon.words(c)) for c in Category},
    }


def api_routes(app: FastAPI) -> list[tuple[str, str, str]]:
    """(methods, path, name) for every API route, sorted by path."""
    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
            routes.append((methods, route.path, route.name))
    return sorted(routes, key=lambda r: (r[1], r[0]))


def print_startup(app: FastAPI, lexicon: Lexicon):
    table = Table(title=f"PESS API {VERSION}")
    table.add_column("Method")
    table.add_column("Path")
    table.add_column("Handler")
    for methods, path, name in api_routes(app):
        table.add_row(methods, path, name)
    console.print(table)

    info = describe_lexicon(lexicon)
    counts = ", ".join(f"{n} {kw}s" for kw, n in info["words"].items())
    console.print(f"Lexicon: {info['backend']} ({counts})")


@asynccontextmanager
async def lifespan(app: FastAPI):
    print_startup(app, default_lexicon())
    yield


app = FastAPI(title="PESS API", version=VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(grammar.router)
app.include_router(vocab.router)


@app.get("/")
async def root(lexicon: Lexicon = Depends(get_lexicon)):
    return {"name": "PESS API", "version": VERSION, "lexicon": describe_lexicon(lexicon)}
