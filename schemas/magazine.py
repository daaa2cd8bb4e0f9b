# schemas/magazine.py
"""
Pydantic schemas for Magazine API request/response validation.
"""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict


class MagazineCreate(BaseModel):
     """Schema for submitting a new magazine article."""
     image_url: Optional[str] = Field(None, max_length=1000, description="Public URL of an already uploaded cover image")
     category: str = Field(..., min_length=1, max_length=100)
     title: str = Field(..., min_length=1, max_length=255)
     description: str = Field(..., min_length=1, max_length=1000)
     content: str = Field(..., min_length=1)
     tags: Optional[List[str]] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "image_url": "https://cdn.example.com/2026/10/17/0f8fad5b-d9cb-469f-a165-70867728950e.jpg",
                    "category": "AI",
                    "title": "Agents in production",
                    "description": "What changes when LLM agents leave the demo stage",
                    "content": "Full article body...",
                    "tags": ["ai", "agents"],
               }
          }
     )


class MagazineSummary(BaseModel):
     """List item for GET /api/magazines."""
     id: int
     image_url: Optional[str] = None
     category: str
     title: str
     description: str
     tags: Optional[List[str]] = None

     model_config = ConfigDict(from_attributes=True)


class MagazineDetail(MagazineSummary):
     """Full article for GET /api/magazines/{id}."""
     content: str
     created_at: Optional[datetime] = None


class MagazineCreateResponse(BaseModel):
     success: bool = True
     id: int
