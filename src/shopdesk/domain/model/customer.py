"""Customer aggregate — referenced by orders and reservations, never owned."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Customer:

    id: str
    email: str
    name: str
    phone: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
