"""
Database Schemas for Yelp Camp

Each Pydantic model represents a MongoDB collection or an incoming form.
Collection names are the lowercase plural of the document class:
- Campground -> "campgrounds" collection
- Review -> "reviews" collection
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

CAMPGROUNDS = "campgrounds"
REVIEWS = "reviews"


class CampgroundIn(BaseModel):
    """Fields a user may submit for a campground."""
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    title: str = Field(..., min_length=1, description="Campground name")
    location: str = Field(..., min_length=1, description="City, State")
    description: str = Field(..., min_length=1, description="Free text description")
    price: float = Field(..., ge=0, description="Price per night in dollars")
    image: str = Field(..., min_length=1, description="Image URL")


class ReviewIn(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    body: str = Field(..., min_length=1, description="Review text")
    rating: int = Field(..., ge=1, le=5, description="Star rating 1-5")


class CampgroundForm(BaseModel):
    """Form payloads nest fields under `campground[...]`."""
    campground: CampgroundIn


class ReviewForm(BaseModel):
    review: ReviewIn


class Review(ReviewIn):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Campground(CampgroundIn):
    id: str
    reviews: List[Review] = Field(default_factory=list)
    review_ids: List[str] = Field(default_factory=list, description="Referenced review ids in order")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
