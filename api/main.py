from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookmarks import router as bookmarks_router
from core import db, settings
from core.errors import register_error_handlers
from core.logging import configure_logging
from core.security_headers import SecurityHeadersMiddleware

configure_logging(settings.log_level())


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, passed to requests via `db.get_pool`.
    app.state.pool = await db.create_pool()
    try:
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None


app = FastAPI(title="bookmarks api", lifespan=lifespan)

app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
    expose_headers=["Location"],
)

register_error_handlers(app)

app.include_router(bookmarks_router.router, tags=["bookmarks"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "bookmarks api"}
