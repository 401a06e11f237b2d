# app/models.py
from pydantic import BaseModel, Field


class ProductIn(BaseModel):
    title: str
    price: float = Field(..., ge=0)
    description: str = ""
    category: str = "general"
    image: str = ""
