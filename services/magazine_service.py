# services/magazine_service.py
"""
Magazine Service - article listing, lookup and submission.
"""
import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from models import Magazine
from schemas.magazine import MagazineCreate


class MagazineService:
     """Service class for magazine-related business logic."""

     @staticmethod
     def list_magazines(db: Session, limit: int = 10) -> List[Magazine]:
          """Newest articles first."""
          return db.query(Magazine).order_by(Magazine.id.desc()).limit(limit).all()

     @staticmethod
     def get_magazine(db: Session, magazine_id: int) -> Optional[Magazine]:
          return db.query(Magazine).filter(Magazine.id == magazine_id).first()

     @staticmethod
     def create_magazine(db: Session, data: MagazineCreate) -> Magazine:
          magazine = Magazine(
               image_url=data.image_url,
               category=data.category,
               title=data.title,
               description=data.description,
               content=data.content,
               tags=data.tags or None,
          )
          db.add(magazine)
          db.commit()
          db.refresh(magazine)
          return magazine


def build_image_path(now: Optional[datetime] = None, file_id: Optional[uuid.UUID] = None) -> str:
     """Storage key for an uploaded cover image: yyyy/mm/dd/<uuid>.jpg"""
     now = now or datetime.now()
     file_id = file_id or uuid.uuid4()
     return f"{now:%Y/%m/%d}/{file_id}.jpg"
