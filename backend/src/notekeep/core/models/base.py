# Base model for database stuff
import uuid
from datetime import datetime
from typing import Any, Dict

from sqlalchemy.orm import DeclarativeBase


class BaseModel(DeclarativeBase):
    """Common base for all models.

    Primary keys and timestamps are declared on each model: users use
    UUIDs, notes use store-allocated integers, and note timestamps are
    written by the service layer rather than column defaults.
    """

    __abstract__ = True

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={getattr(self, 'id', None)})>"

    def __eq__(self, other: object) -> bool:
        """Equality by primary key if available and same mapped class."""
        if self is other:
            return True
        if not isinstance(other, self.__class__):
            return NotImplemented  # type: ignore[return-value]
        own_id = getattr(self, "id", None)
        return own_id is not None and own_id == getattr(other, "id", None)

    def __hash__(self) -> int:
        return id(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON."""
        result = {}
        for column in self.__table__.columns:
            val = getattr(self, column.name)
            if isinstance(val, uuid.UUID):
                val = str(val)
            elif isinstance(val, datetime):
                val = val.isoformat()
            result[column.name] = val
        return result
