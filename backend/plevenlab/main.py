# plevenlab/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from plevenlab.config import settings
from plevenlab.core.db import init_db, close_db
from plevenlab.core.errors import CredentialError, ErrorKind
from plevenlab.core.security import get_token_issuer

from plevenlab.api.v1.routers import auth, users, categories, events, posts

from plevenlab.core.bootstrap import ensure_default_admin
logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS (any origin, bearer tokens only, no cookies)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(CredentialError)
async def credential_error_handler(request: Request, exc: CredentialError):
    """
    Map credential errors to HTTP responses by kind.
    Caller mistakes become 400; corrupt stored data and missing keys are
    server faults and are logged as such.
    """
    if exc.kind in (ErrorKind.INVALID_INPUT, ErrorKind.POLICY_UNSATISFIABLE):
        return JSONResponse(status_code=400, content={"detail": {"code": exc.kind.value, "message": exc.message}})
    logger.error("[auth] %s on %s %s: %s", exc.kind.value, request.method, request.url.path, exc.message)
    return JSONResponse(status_code=500, content={"detail": {"code": "INTERNAL_ERROR", "message": "Internal server error"}})

@app.on_event("startup")
async def on_startup():
    # Refuse to start without a usable signing secret
    get_token_issuer()
    await init_db()
    # Ensure there's an admin account on first run, before any request is served
    await ensure_default_admin()

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# REST
app.include_router(auth.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")
app.include_router(categories.router, prefix="/api/v1")
app.include_router(events.router, prefix="/api/v1")
app.include_router(posts.router, prefix="/api/v1")

@app.get("/healthz")
def healthz():
    return {"ok": True}
