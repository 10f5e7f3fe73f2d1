"""Generic CRUD base class for SQLAlchemy models."""

from __future__ import annotations

from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.database import Base


ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
	"""Reusable CRUD helper for SQLAlchemy models.

	All methods operate on model instances and return database objects, not schemas.
	Every write commits on success and rolls back before re-raising on failure.
	"""

	def __init__(self, model: Type[ModelType]):
		self.model = model

	# ----- Read -----
	def get(self, db: Session, id: Any) -> Optional[ModelType]:
		"""Get one record by primary key."""
		return db.get(self.model, id)

	def count(self, db: Session) -> int:
		"""Count all records."""
		stmt = select(func.count()).select_from(self.model)
		return db.scalar(stmt) or 0

	# ----- Write -----
	def save(self, db: Session, db_obj: ModelType) -> ModelType:
		"""Add, commit and refresh a single object."""
		try:
			db.add(db_obj)
			db.commit()
			db.refresh(db_obj)
		except Exception:
			db.rollback()
			raise
		return db_obj

	# ----- Delete -----
	def remove(self, db: Session, *, db_obj: ModelType) -> ModelType:
		"""Hard delete a record; ORM cascades apply."""
		try:
			db.delete(db_obj)
			db.commit()
		except Exception:
			db.rollback()
			raise
		return db_obj
