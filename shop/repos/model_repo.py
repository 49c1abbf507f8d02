# shop/repos/model_repo.py
from typing import Any, Dict, List, Optional, Sequence

from pydantic import TypeAdapter
from sqlalchemy import JSON, select
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Session

from shop.utils.logging import get_logger
from shop.utils.serialize import column_fields

logger = get_logger(__name__)


class ModelRepo:
    """find/create/update/delete for one mapped model, keyed by wire field names."""

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model
        self.fields = column_fields(model)
        self.pk = self.model.__mapper__.primary_key[0]

    def find_many(
        self,
        where: Optional[Dict[str, Any]] = None,
        options: Sequence = (),
    ) -> List[Any]:
        stmt = select(self.model)
        for field, value in (where or {}).items():
            stmt = stmt.where(getattr(self.model, self.fields[field].key) == value)
        stmt = stmt.order_by(self.pk)
        if options:
            stmt = stmt.options(*options)
        return list(self.db.execute(stmt).scalars().all())

    def find_unique(self, ident) -> Any | None:
        return self.db.get(self.model, ident)

    def create(self, data: Dict[str, Any]) -> Any:
        obj = self.model(**self.to_values(data))
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def update(self, ident, data: Dict[str, Any]) -> Any:
        obj = self.find_unique(ident)
        if obj is None:
            raise NoResultFound(f"{self.model.__name__} {ident!r} not found")

        for key, value in self.to_values(data).items():
            setattr(obj, key, value)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def delete(self, ident) -> None:
        obj = self.find_unique(ident)
        if obj is None:
            raise NoResultFound(f"{self.model.__name__} {ident!r} not found")
        self.db.delete(obj)
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    def to_values(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Maps wire names to attribute keys and coerces submitted text to the
        column's python type. Unknown fields are dropped.
        Raises pydantic.ValidationError for values that do not coerce.
        """
        values: Dict[str, Any] = {}
        for field, raw in data.items():
            prop = self.fields.get(field)
            if prop is None:
                logger.debug(f"{self.model.__name__}: ignoring unknown field {field!r}")
                continue
            values[prop.key] = self._coerce(prop.columns[0], raw)
        return values

    @staticmethod
    def _coerce(column, raw):
        if raw is None or isinstance(column.type, JSON):
            return raw
        if raw == "" and column.nullable:
            return None

        try:
            python_type = column.type.python_type
        except NotImplementedError:
            return raw
        if python_type is str:
            return str(raw)
        return TypeAdapter(python_type).validate_python(raw)
