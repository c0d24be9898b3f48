"""Destination marker lookup."""

from app.schemas.vehicle import Coordinate

# Coarse stand-in for a geocoder: only the two rail towns are known.
KNOWN_PLACES: tuple[tuple[str, Coordinate], ...] = (
    ("greenfield", Coordinate(lat=42.5879, lon=-72.5995)),
    ("northampton", Coordinate(lat=42.3195, lon=-72.6298)),
)


class KnownPlaceResolver:
    """Resolves free text to a coordinate by case-insensitive substring match."""

    def __init__(self, places=KNOWN_PLACES) -> None:
        self.places = tuple(places)

    def resolve(self, text: str) -> Coordinate | None:
        lowered = text.lower()
        for needle, location in self.places:
            if needle in lowered:
                return location
        return None
