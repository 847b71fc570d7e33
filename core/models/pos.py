# =============================================================================
# core/models/pos.py - Point of Sale Entity
# =============================================================================
# A venue that can be reviewed (cafe, bakery, vending machine, ...).
# The review workflow only relies on the identity; the rest is descriptive.
# =============================================================================

from enum import Enum

from pydantic import Field

from .base import DomainModel


class PosType(str, Enum):
    """Kind of point of sale."""
    CAFE = "CAFE"
    VENDING_MACHINE = "VENDING_MACHINE"
    BAKERY = "BAKERY"
    CAFETERIA = "CAFETERIA"


class CampusType(str, Enum):
    """Campus the point of sale is located on."""
    ALTSTADT = "ALTSTADT"
    BERGHEIM = "BERGHEIM"
    INF = "INF"


class Pos(DomainModel):
    """
    A point of sale (venue) that users can review.

    Example:
        {
            "id": 1,
            "name": "Schmelzpunkt",
            "description": "Great waffles",
            "type": "CAFE",
            "campus": "ALTSTADT",
            "street": "Hauptstraße",
            "house_number": "90",
            "postal_code": 69117,
            "city": "Heidelberg"
        }
    """

    # Natural key, unique across all POS
    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Unique display name"
    )

    description: str = Field(
        default="",
        description="Free-form description"
    )

    type: PosType = Field(
        ...,
        description="Kind of venue"
    )

    campus: CampusType = Field(
        ...,
        description="Campus location"
    )

    street: str = Field(..., min_length=1)
    house_number: str = Field(..., min_length=1)
    postal_code: int = Field(..., ge=1)
    city: str = Field(..., min_length=1)
