from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional


class GeoLocation(NamedTuple):
    """latitude/longitude pair, printed to 6 decimal places"""

    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"{self.latitude:.6f}, {self.longitude:.6f}"


# helpers ---------------------------------------------------------------

def _lower_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    # dataset field names are case-insensitive; first spelling wins
    out: Dict[str, Any] = {}
    for k, v in data.items():
        out.setdefault(str(k).lower(), v)
    return out


def _optional_str(value: Any, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    return value


# validation ------------------------------------------------------------

def validate_name(name: Any) -> str:
    # name must be present and a string; blank is allowed (never counted)
    if name is None:
        raise ValueError("name is required")
    if not isinstance(name, str):
        raise ValueError("name must be a string")
    return name


def validate_population(population: Any) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(population, bool) or not isinstance(population, int):
        raise ValueError("population must be an integer")
    if population < 0:
        raise ValueError("population must be >= 0")
    return population


def validate_coordinate(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number")
    return float(value)


@dataclass(frozen=True)
class Monkey:
    """monkey record from the catalog; immutable once built"""

    name: str
    location: Optional[str] = None
    details: Optional[str] = None
    image: Optional[str] = None
    population: int = 0
    latitude: float = 0.0
    longitude: float = 0.0

    def __post_init__(self):
        validate_name(self.name)
        validate_population(self.population)
        # frozen, so normalize ints to floats through object.__setattr__
        object.__setattr__(self, "latitude", validate_coordinate(self.latitude, "latitude"))
        object.__setattr__(self, "longitude", validate_coordinate(self.longitude, "longitude"))

    @property
    def coordinates(self) -> GeoLocation:
        return GeoLocation(self.latitude, self.longitude)

    @property
    def is_named(self) -> bool:
        return bool(self.name.strip())

    # serialization helpers -------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "Location": self.location,
            "Details": self.details,
            "Image": self.image,
            "Population": self.population,
            "Latitude": self.latitude,
            "Longitude": self.longitude,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Monkey":
        # construct from a dataset row; field names match case-insensitively
        if not isinstance(data, dict):
            raise ValueError("monkey record must be an object")
        row = _lower_keys(data)
        if "name" not in row:
            raise ValueError("name is required")
        return cls(
            name=validate_name(row["name"]),
            location=_optional_str(row.get("location"), "location"),
            details=_optional_str(row.get("details"), "details"),
            image=_optional_str(row.get("image"), "image"),
            population=row.get("population", 0),
            latitude=row.get("latitude", 0.0),
            longitude=row.get("longitude", 0.0),
        )
