from typing import Any, Dict, List, Optional, Type, TypeVar
from pydantic import BaseModel
from sqlalchemy.orm import Session

from database.transaction import unit_of_work
from utils.exceptions import NotFoundError
from utils.validation import require_fields

ModelType = TypeVar('ModelType')


class BaseService:
    """
    Single-table repository shared by the entity services.

    Subclasses set ``required_fields`` and the messages used when validation,
    a foreign key reference or a lookup fails.
    """

    required_fields: tuple = ()
    validation_message = "All fields are required"
    not_found_message = "Resource not found"
    conflict_message: Optional[str] = None

    def __init__(self, model: Type[ModelType]):
        self.model = model
        self.pk = model.__mapper__.primary_key[0]

    def validate(self, obj_in: BaseModel) -> None:
        require_fields(obj_in, self.required_fields, self.validation_message)

    def get(self, db: Session, id: int) -> Optional[ModelType]:
        return db.get(self.model, id)

    def get_or_404(self, db: Session, id: int) -> ModelType:
        db_obj = self.get(db, id)
        if db_obj is None:
            raise NotFoundError(self.not_found_message)
        return db_obj

    def get_all(self, db: Session) -> List[ModelType]:
        return db.query(self.model).order_by(self.pk).all()

    def create(self, db: Session, obj_in, error_message: str = "Failed to create record") -> ModelType:
        """
        Validate and insert a new row.

        Args:
            db: Database session
            obj_in: Either a SQLAlchemy model or a Pydantic schema

        Returns:
            The created model instance
        """
        if isinstance(obj_in, BaseModel):
            self.validate(obj_in)
            db_obj = self.model(**obj_in.model_dump())
        else:
            db_obj = obj_in

        with unit_of_work(db, error_message, self.conflict_message):
            db.add(db_obj)
            db.flush()
        db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        id: int,
        values: Dict[str, Any],
        error_message: str = "Failed to update record",
        conflict_message: Optional[str] = None,
    ) -> ModelType:
        with unit_of_work(db, error_message, conflict_message or self.conflict_message):
            db_obj = self.get_or_404(db, id)
            for key, value in values.items():
                setattr(db_obj, key, value)
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, id: int, error_message: str = "Failed to delete record") -> None:
        with unit_of_work(db, error_message):
            deleted = db.query(self.model).filter(self.pk == id).delete()
            if not deleted:
                raise NotFoundError(self.not_found_message)
