# routers/magazines.py
"""
Magazine API routes.

Readers list and open articles; authors submit new ones.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_session
from schemas.magazine import MagazineCreate, MagazineSummary, MagazineDetail, MagazineCreateResponse
from services.magazine_service import MagazineService

router = APIRouter(prefix="/api/magazines", tags=["magazines"])


@router.get(
     "",
     response_model=List[MagazineSummary],
     summary="List magazines",
)
def list_magazines(
     limit: int = Query(10, ge=1, le=100, description="Maximum number of articles"),
     db: Session = Depends(get_session),
):
     return MagazineService.list_magazines(db, limit=limit)


@router.get(
     "/{magazine_id}",
     response_model=MagazineDetail,
     summary="Get a magazine",
)
def get_magazine(magazine_id: int, db: Session = Depends(get_session)):
     magazine = MagazineService.get_magazine(db, magazine_id)
     if not magazine:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=f"Magazine with ID {magazine_id} not found"
          )
     return magazine


@router.post(
     "",
     response_model=MagazineCreateResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Submit a magazine",
)
def create_magazine(data: MagazineCreate, db: Session = Depends(get_session)):
     """
     Submit a new article.

     - **image_url**: optional URL of a cover image that is already hosted
     - **category**, **title**, **description**, **content**: required
     - **tags**: optional list of tags
     """
     magazine = MagazineService.create_magazine(db, data)
     return MagazineCreateResponse(id=magazine.id)
