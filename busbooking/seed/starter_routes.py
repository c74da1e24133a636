"""Fixed route catalog written on first startup.

Each row is ``(source, destination, departure, arrival, capacity, price)``;
initial availability always equals capacity.
"""
from datetime import time
from decimal import Decimal
from typing import Any, Dict, Tuple

SeedRow = Tuple[str, str, str, str, int, str]

STARTER_ROUTES: Tuple[SeedRow, ...] = (
    ("Bucharest", "Brașov", "08:00", "10:30", 40, "50.00"),
    ("Bucharest", "Brașov", "14:00", "16:30", 40, "50.00"),
    ("Bucharest", "Cluj", "07:00", "12:00", 50, "100.00"),
    ("Bucharest", "Constanța", "09:00", "11:30", 45, "65.00"),
    ("Brașov", "Cluj", "10:00", "14:00", 35, "75.00"),
    ("Brașov", "Bucharest", "11:00", "13:30", 40, "50.00"),
    ("Cluj", "Bucharest", "08:00", "13:00", 50, "100.00"),
    ("Cluj", "Brașov", "15:00", "19:00", 35, "75.00"),
    ("Constanța", "Bucharest", "12:00", "14:30", 45, "65.00"),
)


def route_row(row: SeedRow) -> Dict[str, Any]:
    """Column values for one seed row."""
    source, destination, departure, arrival, capacity, price = row
    if capacity < 0:
        raise ValueError(f"Seed capacity must be >= 0, got {capacity}")
    return {
        "source_city": source,
        "destination_city": destination,
        "departure_time": time.fromisoformat(departure),
        "arrival_time": time.fromisoformat(arrival),
        "total_seats": capacity,
        "available_seats": capacity,
        "price": Decimal(price),
    }
