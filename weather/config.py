import os
from dataclasses import dataclass, field, replace as _replace
from datetime import tzinfo
from typing import Optional

from dotenv import load_dotenv

from .models import Units

load_dotenv()

OPENWEATHERMAP_URL = os.getenv("OPENWEATHERMAP_URL", "https://api.openweathermap.org/data/2.5/")
OPENWEATHERMAP_APIKEY = os.getenv("OPENWEATHERMAP_APIKEY", "").strip()
WEATHER_UNITS = os.getenv("WEATHER_UNITS", Units.KELVIN.value).strip().lower()
PER_REQ_TIMEOUT = float(os.getenv("PER_REQ_TIMEOUT", "5"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuración explícita del cliente (sin estado global mutable).
    Los valores por defecto salen del entorno; cada opción se puede sobreescribir por nombre.
    """
    api_key: str = OPENWEATHERMAP_APIKEY
    units: Units = field(default_factory=lambda: Units(WEATHER_UNITS))
    timeout: float = PER_REQ_TIMEOUT
    base_url: str = OPENWEATHERMAP_URL
    # None -> zona horaria local del sistema
    tz: Optional[tzinfo] = None

    def __post_init__(self):
        # aceptamos "metric" o Units.METRIC; un valor desconocido -> ValueError
        object.__setattr__(self, "units", Units(self.units))

    def replace(self, **options) -> "ClientConfig":
        return _replace(self, **options)
