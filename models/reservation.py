"""
models/reservation.py
---------------------
Domain model for table reservations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from exceptions import RowMappingError, ValidationError


@dataclass
class Reservation:
    """
    A booking made by a customer.

    Attributes:
        customer_id: Owning customer's primary key.
        num_guests: Party size (at least 1).
        start_at: When the party is expected.
        notes: Free-text annotation.
        id: Database primary key (None until first saved).
    """
    customer_id: int
    num_guests: int
    start_at: datetime
    notes: str = ""
    id: Optional[int] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ValidationError unless the party has at least one guest."""
        if self.num_guests is None or self.num_guests < 1:
            raise ValidationError(
                f"Reservation needs at least 1 guest, got {self.num_guests}"
            )

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Reservation":
        """Build a Reservation from a row keyed by the repository's SELECT aliases."""
        try:
            return cls(
                id=row["id"],
                customer_id=row["customerId"],
                num_guests=row["numGuests"],
                start_at=row["startAt"],
                notes=row.get("notes") or "",
            )
        except KeyError as e:
            raise RowMappingError(f"Reservation row is missing column {e}") from e

    def __str__(self) -> str:
        return f"{self.num_guests} guest(s) at {self.start_at:%Y-%m-%d %H:%M}"
