"""Location catalog model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    slug: str
    name: str
    region: str
    lat: float
    lon: float

    @property
    def coordinates(self) -> tuple[float, float]:
        return (self.lat, self.lon)
