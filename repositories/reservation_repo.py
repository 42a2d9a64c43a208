"""
repositories/reservation_repo.py
--------------------------------
Data access layer for reservations.
All SQL queries related to the `reservations` table live here.
"""

from db.connection import Database, default_db
from exceptions import NotFoundError
from models.reservation import Reservation
from utils.logger import get_logger

logger = get_logger(__name__)

_SELECT_COLUMNS = """
    SELECT id,
           customer_id AS "customerId",
           num_guests AS "numGuests",
           start_at AS "startAt",
           notes
    FROM reservations
"""


class ReservationRepository:
    """Repository for CRUD operations on the reservations table."""

    def __init__(self, db: Database | None = None):
        self.db = db or default_db

    # ── READ ──────────────────────────────────────────────

    def get_reservations_for_customer(self, customer_id: int) -> list[Reservation]:
        """
        Fetch every reservation belonging to a customer.

        Args:
            customer_id: Owning customer's primary key.

        Returns:
            List of Reservation objects ordered by start time (may be empty).
        """
        sql = _SELECT_COLUMNS + " WHERE customer_id = %s ORDER BY start_at;"
        rows = self.db.query(sql, (customer_id,))
        return [Reservation.from_row(r) for r in rows]

    def get(self, reservation_id: int) -> Reservation:
        """
        Fetch a single reservation by ID.

        Raises:
            NotFoundError: If no reservation has this ID.
        """
        rows = self.db.query(_SELECT_COLUMNS + " WHERE id = %s;", (reservation_id,))
        if not rows:
            logger.warning(f"Reservation #{reservation_id} not found")
            raise NotFoundError(f"No such reservation: {reservation_id}")
        return Reservation.from_row(rows[0])

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, reservation: Reservation) -> None:
        """
        Insert the reservation if it is new, otherwise overwrite its row.

        A new reservation gets its `id` populated from the database.
        """
        reservation.validate()
        if reservation.id is None:
            sql = """
                INSERT INTO reservations (customer_id, num_guests, start_at, notes)
                VALUES (%s, %s, %s, %s)
                RETURNING id;
            """
            rows = self.db.query(sql, (
                reservation.customer_id, reservation.num_guests,
                reservation.start_at, reservation.notes,
            ))
            reservation.id = rows[0]["id"]
            logger.info(
                f"Added reservation #{reservation.id} for customer {reservation.customer_id}"
            )
        else:
            sql = """
                UPDATE reservations
                SET customer_id = %s, num_guests = %s, start_at = %s, notes = %s
                WHERE id = %s;
            """
            self.db.query(sql, (
                reservation.customer_id, reservation.num_guests,
                reservation.start_at, reservation.notes, reservation.id,
            ))
            logger.info(f"Updated reservation #{reservation.id}")
