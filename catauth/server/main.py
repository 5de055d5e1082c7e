"""FastAPI application entrypoint for the fake identity server."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi import HTTPException

import catauth.server.runtime as runtime
from catauth.server.api.routers import authentication
from catauth.server.api.routers import user
from catauth.server.auth.errors import RegistrationRejectedError
from catauth.server.auth.http import handle_http_exception
from catauth.server.auth.http import handle_registration_rejected


@asynccontextmanager
async def lifespan(_: FastAPI):
    runtime.startup()
    yield


def create_app() -> FastAPI:
    application = FastAPI(title="catauth fake identity server", lifespan=lifespan)
    application.add_exception_handler(HTTPException, handle_http_exception)
    application.add_exception_handler(RegistrationRejectedError, handle_registration_rejected)
    application.include_router(authentication.router)
    application.include_router(user.router)
    return application


app = create_app()
