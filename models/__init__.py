"""
models/ - Domain Models
=======================
Plain dataclasses for customers and reservations, built from database rows.
"""
