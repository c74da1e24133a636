from datetime import time
from decimal import Decimal
from typing import List
from pydantic import AliasChoices, BaseModel, Field


class RouteOut(BaseModel):
    """Schema for route responses"""
    id: int
    source_city: str
    destination_city: str
    departure_time: time
    arrival_time: time
    duration: str = Field(validation_alias=AliasChoices("duration_label", "duration"))
    total_seats: int
    available_seats: int
    price: Decimal

    model_config = {
        "from_attributes": True,
    }


class RouteListOut(BaseModel):
    """Overview listing with its size"""
    count: int
    routes: List[RouteOut]
