"""
Pydantic models for CampusCoffee points of sale
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# ============================================================
# Enumerations
# ============================================================

class PosType(str, Enum):
    """Kind of point of sale"""
    CAFE = "CAFE"
    CAFETERIA = "CAFETERIA"
    VENDING_MACHINE = "VENDING_MACHINE"
    BAKERY = "BAKERY"


class CampusType(str, Enum):
    """Heidelberg University campus areas"""
    ALTSTADT = "ALTSTADT"
    BERGHEIM = "BERGHEIM"
    INF = "INF"


# ============================================================
# Point of Sale
# ============================================================

class Pos(BaseModel):
    """
    A point of sale in the campus-coffee directory.

    ``id`` is assigned by storage; a POS without one has not been persisted yet.
    Audit timestamps are owned by the storage layer as well.
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    type: PosType
    campus: CampusType
    street: str = Field(min_length=1)
    house_number: str = Field(min_length=1)
    postal_code: int
    city: str = Field(min_length=1)

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
