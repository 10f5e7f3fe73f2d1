"""Form parsing dependencies.

HTML forms post urlencoded or multipart bodies. Each dependency collects the
raw fields (missing fields arrive as empty strings) and validates them into
the matching pydantic schema, turning validation errors into a single
user-facing message.
"""

from typing import Type, TypeVar

from fastapi import Form
from pydantic import BaseModel, ValidationError

from app.core.exceptions import FormValidationException
from app.schemas.comment import CommentCreate
from app.schemas.post import PostCreate, PostUpdate
from app.schemas.user import UserCreate, UserLogin

FormModel = TypeVar("FormModel", bound=BaseModel)

REQUIRED_ERROR_TYPES = {"missing", "string_too_short"}


def validate_form(model: Type[FormModel], required_message: str, **fields) -> FormModel:
    """Build `model` from form fields or raise FormValidationException (400)."""
    try:
        return model(**fields)
    except ValidationError as exc:
        error = exc.errors()[0]
        if error["type"] in REQUIRED_ERROR_TYPES:
            raise FormValidationException(detail=required_message) from exc
        cause = error.get("ctx", {}).get("error")
        raise FormValidationException(detail=str(cause) if cause else error["msg"]) from exc


def register_form(
    username: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
) -> UserCreate:
    return validate_form(
        UserCreate, "Tüm alanları doldurunuz",
        username=username, email=email, password=password,
    )


def login_form(
    email: str = Form(""),
    password: str = Form(""),
) -> UserLogin:
    return validate_form(UserLogin, "Email ve şifre gerekli", email=email, password=password)


def post_create_form(
    title: str = Form(""),
    body: str = Form(""),
    category: str = Form(""),
) -> PostCreate:
    return validate_form(
        PostCreate, "Başlık, içerik ve kategori zorunludur",
        title=title, body=body, category=category,
    )


def post_update_form(
    title: str = Form(""),
    body: str = Form(""),
    category: str = Form(""),
) -> PostUpdate:
    return validate_form(
        PostUpdate, "Başlık, içerik ve kategori zorunludur",
        title=title, body=body, category=category,
    )


def comment_form(body: str = Form("")) -> CommentCreate:
    return validate_form(CommentCreate, "Yorum boş olamaz", body=body)
