import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenClaims(BaseModel):
    """Verified token payload. Extra claims are ignored, missing ones reject the token."""

    user_id: int = Field(alias="userId")
    exp: int


class ExpenseIn(BaseModel):
    # all optional: a missing column is reported by storage, not here
    title: Optional[str] = None
    amount: Optional[float] = None
    category: Optional[str] = None
    description: Optional[str] = None
    date: Optional[dt.date] = None


class ExpenseOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    amount: float
    category: str
    description: Optional[str]
    date: dt.date
    created_at: dt.datetime
    updated_at: dt.datetime


class Summary(BaseModel):
    labels: list[str]
    data: list[float]
    total: float


class SignUpIn(BaseModel):
    email: str
    password: str
    full_name: Optional[str] = Field(default=None, alias="fullName")


class SignInIn(BaseModel):
    email: str
    password: str


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    full_name: Optional[str]


class AuthOut(BaseModel):
    token: str
    user: UserOut


class Ack(BaseModel):
    success: bool = True
