"""
morphsearch API Server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from morphsearch.server.deps import get_lexicon
from morphsearch.server.routes import lexicon, patterns

logger = logging.getLogger(__name__)


def print_routes(app: FastAPI):
    print("\n" + "=" * 60)
    print("morphsearch API Routes")
    print("=" * 60)

    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(route.methods - {"HEAD", "OPTIONS"})
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    for methods, path, name in routes:
        print(f"  {methods:8} {path:48} → {name}")

    print("=" * 60 + "\n")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Build the bundled lexicon before the first request
    logger.info("lexicon ready: %r", get_lexicon())
    print_routes(app)
    yield


app = FastAPI(title="morphsearch API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(patterns.router)
app.include_router(lexicon.router)


@app.get("/")
async def root():
    return {"name": "morphsearch API", "version": "0.1.0"}
