# models/magazine.py
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, func
from .base import Base


class Magazine(Base):
     """
     Magazine article. Maps to the 'magazine' table.
     """
     __tablename__ = "magazine"

     id = Column(Integer, primary_key=True, autoincrement=True)
     image_url = Column(String(1000), nullable=True)
     category = Column(String(100), nullable=False, index=True)
     title = Column(String(255), nullable=False)
     description = Column(String(1000), nullable=False)
     content = Column(Text, nullable=False)
     tags = Column(JSON, nullable=True)  # list of strings
     created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

     def __repr__(self):
          return f"<Magazine(id={self.id}, category='{self.category}', title='{self.title}')>"
