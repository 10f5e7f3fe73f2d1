"""Pydantic schemas for `User` domain objects."""

import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserCreate(BaseModel):
	"""Registration form."""
	username: str = Field(..., min_length=1, max_length=50)
	email: str = Field(..., min_length=1, max_length=255)
	password: str = Field(..., min_length=1)

	@field_validator("username", "email", mode="before")
	@classmethod
	def strip_text(cls, v):
		return v.strip() if isinstance(v, str) else v

	@field_validator("email")
	@classmethod
	def validate_email(cls, v: str) -> str:
		if not EMAIL_PATTERN.match(v):
			raise ValueError("Geçerli bir email adresi giriniz")
		return v.lower()

	model_config = ConfigDict(json_schema_extra={
		"example": {
			"username": "rootkali",
			"email": "ogrenci@example.com",
			"password": "StrongPass!234",
		}
	})


class UserLogin(BaseModel):
	"""Login form."""
	email: str = Field(..., min_length=1)
	password: str = Field(..., min_length=1)

	@field_validator("email", mode="before")
	@classmethod
	def normalize_email(cls, v):
		return v.strip().lower() if isinstance(v, str) else v

	model_config = ConfigDict(json_schema_extra={
		"example": {
			"email": "ogrenci@example.com",
			"password": "StrongPass!234",
		}
	})


class UserSummary(BaseModel):
	"""Author info embedded in posts and comments."""
	id: int
	username: str

	model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
	id: int
	email: str
	username: str
	is_admin: bool
	created_at: Optional[datetime] = None

	model_config = ConfigDict(from_attributes=True, json_schema_extra={
		"example": {
			"id": 1,
			"email": "ogrenci@example.com",
			"username": "rootkali",
			"is_admin": False,
			"created_at": "2025-01-01T10:00:00Z",
		}
	})


class AuthFormResponse(BaseModel):
	"""View model for the register/login forms."""
	form: str
	current_user: Optional[UserResponse] = None
