from typing import Any, Dict, Iterable, List
from sqlalchemy.orm import Session
from portfolio_cms.repositories.base import CRUDRepository

def clean_technologies(names: Iterable[str]) -> List[str]:
    cleaned = []
    for name in names:
        name = name.strip()
        if name and name not in cleaned:
            cleaned.append(name)
    return cleaned

class TechnologyListRepository(CRUDRepository):
    """
    Parent rows that carry a flat list of technology names stored in a child table.

    A create or update that includes ``technologies`` replaces every child row
    of the parent. The delete, the inserts and the parent's own changes share
    one commit, so readers never see the parent with its list half rewritten.
    """

    def __init__(self, model, label: str, child_model, parent_key: str, order_by=None):
        super().__init__(model, label, order_by=order_by)
        self.child_model = child_model
        self.parent_key = parent_key

    def _children(self, parent_id: int, names: List[str]):
        return [self.child_model(**{self.parent_key: parent_id, "name": name}) for name in names]

    def create(self, db: Session, data: Dict[str, Any]):
        data = dict(data)
        names = clean_technologies(data.pop("technologies", None) or [])

        item = self.model(**data)
        db.add(item)
        db.flush()
        db.add_all(self._children(item.id, names))
        db.commit()
        db.refresh(item)
        return item

    def update(self, db: Session, item_id: int, data: Dict[str, Any]):
        data = dict(data)
        names = data.pop("technologies", None)

        item = self.get(db, item_id)
        for field, value in data.items():
            setattr(item, field, value)

        if names is not None:
            parent_column = getattr(self.child_model, self.parent_key)
            db.query(self.child_model).filter(parent_column == item.id).delete(synchronize_session=False)
            db.add_all(self._children(item.id, clean_technologies(names)))

        db.commit()
        db.refresh(item)
        return item
