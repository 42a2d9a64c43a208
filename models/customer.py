"""
models/customer.py
------------------
Domain model for restaurant customers.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from exceptions import RowMappingError


@dataclass
class Customer:
    """
    A customer of the restaurant.

    Attributes:
        first_name: Given name, as displayed and searched.
        last_name: Family name, as displayed and searched.
        phone: Optional contact number.
        notes: Free-text annotation (empty when there is none).
        id: Database primary key (None until first saved).
    """
    first_name: str
    last_name: str
    phone: Optional[str] = None
    notes: str = ""
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Customer":
        """
        Build a Customer from a row keyed by the repository's SELECT aliases.

        Columns other than the customer's own (e.g. an aggregate count) are ignored.

        Raises:
            RowMappingError: If the row lacks a required column.
        """
        try:
            return cls(
                id=row["id"],
                first_name=row["firstName"],
                last_name=row["lastName"],
                phone=row.get("phone"),
                notes=row.get("notes") or "",
            )
        except KeyError as e:
            raise RowMappingError(f"Customer row is missing column {e}") from e

    def full_name(self) -> str:
        """Returns first and last name joined by a single space."""
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name()
