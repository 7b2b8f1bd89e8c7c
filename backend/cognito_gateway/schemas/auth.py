"""
Pydantic schemas for the Cognito proxy routes.

Bodies and fields are optional and untyped; Cognito (or botocore) is the only validator.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SignupIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: Any = None
    password: Any = None
    first_name: Any = Field(None, alias="firstName")
    last_name: Any = Field(None, alias="lastName")


class ConfirmIn(BaseModel):
    email: Any = None
    code: Any = None


class LoginIn(BaseModel):
    email: Any = None
    password: Any = None


class ResendIn(BaseModel):
    email: Any = None


class MessageOut(BaseModel):
    message: str


class SignupOut(BaseModel):
    message: str
    response: dict[str, Any]


class LoginOut(BaseModel):
    message: str
    tokens: dict[str, Any]
    user: dict[str, str]


class HealthOut(BaseModel):
    success: str
    url: str
