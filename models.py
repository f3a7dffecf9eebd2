"""Dataclasses for weather data."""

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class WeatherData:
    name: str
    country: str = ""
    temp: float = 0.0
    humidity: float = 0.0
    wind_speed: float = 0.0
    wind_deg: float = 0.0
    sunrise: int = 0    # unix seconds, 0 when unknown
    sunset: int = 0
    description: str = ""

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, d):
        return cls(
            name=d["name"],
            country=d.get("country", ""),
            temp=d.get("temp", 0.0),
            humidity=d.get("humidity", 0.0),
            wind_speed=d.get("wind_speed", 0.0),
            wind_deg=d.get("wind_deg", 0.0),
            sunrise=d.get("sunrise", 0),
            sunset=d.get("sunset", 0),
            description=d.get("description", ""),
        )
