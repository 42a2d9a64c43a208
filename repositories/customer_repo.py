"""
repositories/customer_repo.py
-----------------------------
Data access layer for customers.
All SQL queries related to the `customers` table live here.
"""

from typing import Any, Mapping

from config import TOP_CUSTOMERS_LIMIT
from db.connection import Database, default_db
from exceptions import InvalidSearchError, NotFoundError
from models.customer import Customer
from models.reservation import Reservation
from repositories.reservation_repo import ReservationRepository
from utils.logger import get_logger

logger = get_logger(__name__)

_SELECT_COLUMNS = """
    SELECT id,
           first_name AS "firstName",
           last_name AS "lastName",
           phone,
           notes
    FROM customers
"""


def _capitalize(word: str) -> str:
    """Upper-case the first character only; the rest stays as typed."""
    return word[:1].upper() + word[1:]


def parse_search_term(term: Any) -> tuple[str, str]:
    """
    Split a "first last" search term into capitalized name parts.

    Everything after the first word is the last name, so "anna van der berg"
    becomes ("Anna", "Van Der Berg").

    Raises:
        InvalidSearchError: If the term is not text or holds fewer than two words.
    """
    if not isinstance(term, str):
        raise InvalidSearchError(f"Search term must be text, got {term!r}")
    words = term.split()
    if len(words) < 2:
        raise InvalidSearchError(
            f"Search needs a first and last name, got {term!r}"
        )
    first_name = _capitalize(words[0])
    last_name = " ".join(_capitalize(w) for w in words[1:])
    return first_name, last_name


class CustomerRepository:
    """Repository for CRUD and search operations on the customers table."""

    def __init__(
        self,
        db: Database | None = None,
        reservations: ReservationRepository | None = None,
    ):
        self.db = db or default_db
        self.reservations = reservations or ReservationRepository(self.db)

    # ── READ ──────────────────────────────────────────────

    def all(self) -> list[Customer]:
        """Fetch every customer, ordered by last name then first name."""
        rows = self.db.query(_SELECT_COLUMNS + " ORDER BY last_name, first_name;")
        return [Customer.from_row(r) for r in rows]

    def get(self, customer_id: int) -> Customer:
        """
        Fetch a single customer by ID.

        Args:
            customer_id: Primary key.

        Returns:
            The matching Customer.

        Raises:
            NotFoundError: If no customer has this ID (status 404).
        """
        rows = self.db.query(_SELECT_COLUMNS + " WHERE id = %s;", (customer_id,))
        if not rows:
            logger.warning(f"Customer #{customer_id} not found")
            raise NotFoundError(f"No such customer: {customer_id}")
        return Customer.from_row(rows[0])

    def get_reservations(self, customer: Customer) -> list[Reservation]:
        """Fetch all reservations made by this customer."""
        return self.reservations.get_reservations_for_customer(customer.id)

    def search(self, params: Mapping[str, Any]) -> int:
        """
        Find a customer by full name.

        Args:
            params: Request parameters holding the raw term under "search",
                e.g. {"search": "jane doe"}. The first letter of each word
                is upper-cased before the exact, case-sensitive match.

        Returns:
            The ID of the matching customer (lowest ID if several share the name).

        Raises:
            InvalidSearchError: If the term is missing, not text, or a single word.
            NotFoundError: If no customer has that name.
        """
        first_name, last_name = parse_search_term(params.get("search"))
        sql = """
            SELECT id FROM customers
            WHERE first_name = %s AND last_name = %s
            ORDER BY id
            LIMIT 1;
        """
        rows = self.db.query(sql, (first_name, last_name))
        if not rows:
            logger.warning(f"No customer named {first_name} {last_name}")
            raise NotFoundError(f"No such customer: {first_name} {last_name}")
        return rows[0]["id"]

    def top_ten(self) -> list[Customer]:
        """
        Fetch the customers who made the most reservations.

        Returns:
            Up to ten Customers, by reservation count descending; equal
            counts are ordered by customer ID.
        """
        sql = """
            SELECT c.id,
                   c.first_name AS "firstName",
                   c.last_name AS "lastName",
                   c.phone,
                   c.notes,
                   COUNT(r.id) AS "reservationCount"
            FROM reservations r
            JOIN customers c ON c.id = r.customer_id
            GROUP BY c.id, c.first_name, c.last_name, c.phone, c.notes
            ORDER BY "reservationCount" DESC, c.id ASC
            LIMIT %s;
        """
        rows = self.db.query(sql, (TOP_CUSTOMERS_LIMIT,))
        return [Customer.from_row(r) for r in rows]

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, customer: Customer) -> None:
        """
        Insert the customer if it is new, otherwise overwrite its row.

        Updates are unconditional (last write wins). A new customer gets
        its `id` populated from the database.
        """
        if customer.id is None:
            sql = """
                INSERT INTO customers (first_name, last_name, phone, notes)
                VALUES (%s, %s, %s, %s)
                RETURNING id;
            """
            rows = self.db.query(sql, (
                customer.first_name, customer.last_name,
                customer.phone, customer.notes or "",
            ))
            customer.id = rows[0]["id"]
            logger.info(f"Added customer #{customer.id} ({customer.full_name()})")
        else:
            sql = """
                UPDATE customers
                SET first_name = %s, last_name = %s, phone = %s, notes = %s
                WHERE id = %s;
            """
            self.db.query(sql, (
                customer.first_name, customer.last_name,
                customer.phone, customer.notes or "", customer.id,
            ))
            logger.info(f"Updated customer #{customer.id}")
