"""Repository base class for database operations.

Provides common CRUD operations plus the persistence error policy: any
`SQLAlchemyError` rolls the session back, is logged with its full detail and
is re-raised as `InfrastructureError`, which carries no store internals.
"""

from contextlib import contextmanager
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, Optional, List, Any
from database.models import Base
from core.exceptions import InfrastructureError
from core.logger import get_logger

logger = get_logger("core.repository")

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    @contextmanager
    def guard(self, operation: str):
        """Translate store failures inside the block into `InfrastructureError`.

        Args:
            operation: Name of the operation, reported in the error details.
        """
        try:
            yield
        except SQLAlchemyError:
            self.session.rollback()
            logger.error("%s.%s failed", self.model.__name__, operation, exc_info=True)
            raise InfrastructureError(operation) from None

    def add(self, obj: T) -> T:
        """Add, commit and refresh a new object."""
        with self.guard("create"):
            self.session.add(obj)
            self.session.commit()
            self.session.refresh(obj)
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an object by its primary key, or None."""
        with self.guard("get"):
            return self.session.get(self.model, id)

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[T]:
        """Retrieve all objects ordered by primary key."""
        with self.guard("list"):
            query = self.session.query(self.model).order_by(self.model.id).offset(skip)
            if limit is not None:
                query = query.limit(limit)
            return query.all()
