"""Application ports package."""

from .billing_repository import BillingRepositoryPort
from .database import DatabaseEnginePort

__all__ = [
    "BillingRepositoryPort",
    "DatabaseEnginePort",
]
