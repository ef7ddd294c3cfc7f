from typing import Any, Dict
from sqlalchemy.orm import Session
from portfolio_cms.core.exceptions import ValidationException
from portfolio_cms.models.skill import SkillCategory
from portfolio_cms.repositories.base import CRUDRepository

class SkillRepository(CRUDRepository):
    """Skills must point at an existing category."""

    def _check_category(self, db: Session, data: Dict[str, Any]) -> None:
        category_id = data.get("category_id")
        if category_id is None:
            return
        if db.get(SkillCategory, category_id) is None:
            raise ValidationException(f"Skill category {category_id} does not exist")

    def create(self, db: Session, data: Dict[str, Any]):
        self._check_category(db, data)
        return super().create(db, data)

    def update(self, db: Session, item_id: int, data: Dict[str, Any]):
        self.get(db, item_id)
        self._check_category(db, data)
        return super().update(db, item_id, data)
