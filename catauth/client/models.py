"""Pydantic models for auth request and response bodies."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class Credentials(BaseModel):
    """POST /authentication request body."""

    username: str
    password: str


class RegistrationRequest(BaseModel):
    """POST /user request body."""

    accepted_terms: bool
    email: str
    username: str
    password: str


class DeprecatedToken(BaseModel):
    """POST /authentication/upgrade request body carrying a legacy upload token."""

    model_config = ConfigDict(populate_by_name=True)

    value: str = Field(alias="upload_token")


class TokenResponse(BaseModel):
    """Success body of login, register and upgrade."""

    model_config = ConfigDict(extra="ignore")

    token: str
    refresh_token: str | None = None


class RegisterFailureDetail(BaseModel):
    """422 body of a rejected registration, one message per failing field."""

    model_config = ConfigDict(extra="ignore")

    email: str | None = None
    username: str | None = None
    password: str | None = None
