"""Default settings and the reference Costa Rican location catalog."""

from climacr.models.location import Location

LOCAL_BACKEND_URL = "http://127.0.0.1:8000"
BACKEND_URL_ENV = "CLIMACR_BACKEND_URL"
DEFAULT_TIMEZONE = "America/Costa_Rica"
DEFAULT_USER_AGENT = "climacr/0.1.0"

# Mirrors what the backend serves from /api/locations.
DEFAULT_LOCATIONS: list[Location] = [
    Location(
        slug="sanjose",
        name="San José",
        region="Valle Central",
        lat=9.93,
        lon=-84.08,
    ),
    Location(
        slug="liberia",
        name="Liberia",
        region="Guanacaste",
        lat=10.63,
        lon=-85.44,
    ),
    Location(
        slug="limon",
        name="Limón",
        region="Caribe",
        lat=9.99,
        lon=-83.03,
    ),
    Location(
        slug="puntarenas",
        name="Puntarenas",
        region="Pacífico Central",
        lat=9.98,
        lon=-84.83,
    ),
    Location(
        slug="perezzeledon",
        name="Pérez Zeledón",
        region="Zona Sur",
        lat=9.37,
        lon=-83.70,
    ),
]
