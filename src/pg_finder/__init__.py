"""Rental listing browser: criteria filtering and free-text search."""
