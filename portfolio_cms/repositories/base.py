import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from portfolio_cms.core.exceptions import NotFoundException

logger = logging.getLogger(__name__)

SINGLETON_ID = 1

class CRUDRepository:
    """List-style content: get_all / get / create / update / delete."""

    def __init__(self, model, label: str, order_by: Optional[Sequence[Any]] = None):
        self.model = model
        self.label = label
        self.order_by = list(order_by) if order_by is not None else [model.id]

    def _not_found(self) -> NotFoundException:
        return NotFoundException(f"{self.label} not found")

    def get_all(self, db: Session) -> List[Any]:
        return db.query(self.model).order_by(*self.order_by).all()

    def get(self, db: Session, item_id: int):
        item = db.get(self.model, item_id)
        if item is None:
            raise self._not_found()
        return item

    def create(self, db: Session, data: Dict[str, Any]):
        item = self.model(**data)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    def update(self, db: Session, item_id: int, data: Dict[str, Any]):
        item = self.get(db, item_id)
        for field, value in data.items():
            setattr(item, field, value)
        db.commit()
        db.refresh(item)
        return item

    def delete(self, db: Session, item_id: int) -> None:
        """Deleting an id that does not exist is not an error."""
        item = db.get(self.model, item_id)
        if item is None:
            return
        db.delete(item)
        db.commit()


class SingletonRepository:
    """
    Site-wide sections stored as a single row.

    The row always has id 1, so two first reads racing each other cannot leave
    two rows behind: the loser's insert hits the primary key and it re-reads
    the winner's row.
    """

    def __init__(self, model, label: str, defaults: Callable[[], Dict[str, Any]]):
        self.model = model
        self.label = label
        self.defaults = defaults

    def _current(self, db: Session):
        return db.query(self.model).order_by(self.model.id).first()

    def get_or_initialize(self, db: Session) -> Tuple[Any, bool]:
        """Return ``(row, created)``; ``created`` is True only on the first touch."""
        item = self._current(db)
        if item is not None:
            return item, False

        item = self.model(id=SINGLETON_ID, **self.defaults())
        db.add(item)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            return self._current(db), False

        db.refresh(item)
        logger.info(f"Initialized {self.model.__tablename__} with defaults")
        return item, True

    def get(self, db: Session):
        item, _ = self.get_or_initialize(db)
        return item

    def update(self, db: Session, data: Dict[str, Any]):
        """Unlike reads, updates never create the row."""
        item = self._current(db)
        if item is None:
            raise NotFoundException(f"{self.label} not found")
        for field, value in data.items():
            setattr(item, field, value)
        db.commit()
        db.refresh(item)
        return item
