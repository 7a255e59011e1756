"""Recoverable dashboard errors and their user-facing messages."""


class DashboardError(Exception):
    """Base for errors that are shown to the user as a plain message."""

    message = "Error"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail


class LocationLoadError(DashboardError):
    """Location catalog fetch or decode failed."""

    message = "No se pudieron cargar ubicaciones"


class WeatherFetchError(DashboardError):
    """Weather request failed on the network or could not be decoded."""

    message = "Error de red"


class WeatherLogicalError(DashboardError):
    """Weather response decoded but reported ok=false."""

    message = "Error al obtener clima"
