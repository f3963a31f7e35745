"""Clinic domain model: people, catalogue, examination states, billing, payments, managers and services."""

__version__ = "1.0.0"

__all__ = [
    "base",
    "billing",
    "catalog",
    "config",
    "managers",
    "payment",
    "people",
    "services",
    "states",
]