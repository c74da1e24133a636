from datetime import date, datetime, timedelta

from sqlalchemy import String, Integer, Numeric, Time
from sqlalchemy.orm import mapped_column, DeclarativeBase


class Base(DeclarativeBase): ...


# ---------- Routes ----------
class Route(Base):
    """A scheduled bus service between two cities.

    Everything except ``available_seats`` is fixed once the route is seeded.
    Times are wall-clock times on the same day; routes crossing midnight are
    not modelled.
    """
    __tablename__ = "routes"
    id               = mapped_column(Integer, primary_key=True, autoincrement=True)
    source_city      = mapped_column(String(120), nullable=False, index=True)
    destination_city = mapped_column(String(120), nullable=False)
    departure_time   = mapped_column(Time, nullable=False)
    arrival_time     = mapped_column(Time, nullable=False)
    total_seats      = mapped_column(Integer, nullable=False)
    # Only column mutated after seeding; written by the booking service alone.
    available_seats  = mapped_column(Integer, nullable=False)
    price            = mapped_column(Numeric(10, 2), nullable=False)

    @property
    def duration(self) -> timedelta:
        start = datetime.combine(date.min, self.departure_time)
        end = datetime.combine(date.min, self.arrival_time)
        return end - start

    @property
    def duration_minutes(self) -> int:
        return int(self.duration.total_seconds() // 60)

    @property
    def duration_label(self) -> str:
        """Duration formatted as ``HH:MM``."""
        hours, minutes = divmod(self.duration_minutes, 60)
        return f"{hours:02d}:{minutes:02d}"

    def __eq__(self, other):
        if not isinstance(other, Route):
            return NotImplemented
        # Transient rows without an id only equal themselves.
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self):
        return hash(self.id) if self.id is not None else id(self)

    def __str__(self):
        return (
            f"{self.source_city} -> {self.destination_city} "
            f"at {self.departure_time:%H:%M} ({self.available_seats} seats)"
        )

    def __repr__(self):
        return f"<Route id={self.id} {self}>"
