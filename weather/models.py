from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Units(str, Enum):
    KELVIN = "kelvin"
    IMPERIAL = "imperial"
    METRIC = "metric"


@dataclass(frozen=True)
class Observation:
    """
    Una lectura meteorológica en un instante.
    Los resúmenes diarios usan la misma forma: timestamp a medianoche del día
    y los campos numéricos con valores agregados. No se validan rangos.
    """
    timestamp: datetime
    temperature: float
    temperature_min: float
    temperature_max: float
    humidity: float


# Forecast: lista ordenada de observaciones (el orden lo decide quien llama)
Forecast = list[Observation]
