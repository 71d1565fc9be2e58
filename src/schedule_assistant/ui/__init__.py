"""Presentation layer for the schedule calendar."""
