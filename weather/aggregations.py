import math
from datetime import datetime
from typing import Iterable

from .models import Forecast, Observation

DAY_KEY_FORMAT = "%Y%m%d"


def _day_key(obs: Observation) -> str:
    # YYYYMMDD en la zona del propio timestamp: ordenable como texto
    return obs.timestamp.strftime(DAY_KEY_FORMAT)


def group_by_day(forecast: Iterable[Observation]) -> list[tuple[str, Forecast]]:
    groups: dict[str, Forecast] = {}
    for obs in forecast:
        groups.setdefault(_day_key(obs), []).append(obs)
    return sorted(groups.items(), key=lambda kv: kv[0])


def maximum_temperature(forecast: Forecast) -> float:
    return max((o.temperature_max for o in forecast), default=-math.inf)


def minimum_temperature(forecast: Forecast) -> float:
    return min((o.temperature_min for o in forecast), default=math.inf)


def average_temperature(forecast: Forecast) -> float:
    if not forecast:
        return math.nan
    return sum(o.temperature for o in forecast) / len(forecast)


def average_humidity(forecast: Forecast) -> float:
    if not forecast:
        return math.nan
    return sum(o.humidity for o in forecast) / len(forecast)


def daily(forecast: Forecast) -> Forecast:
    """
    Reduce una previsión horaria a un resumen por día natural, ordenado por fecha.
    Todas las fechas se construyen con la zona de la primera observación recibida.
    """
    if not forecast:
        return []
    zone = forecast[0].timestamp.tzinfo

    out: Forecast = []
    for key, hourly in group_by_day(forecast):
        out.append(Observation(
            timestamp=datetime.strptime(key, DAY_KEY_FORMAT).replace(tzinfo=zone),
            temperature=average_temperature(hourly),
            temperature_min=minimum_temperature(hourly),
            temperature_max=maximum_temperature(hourly),
            humidity=average_humidity(hourly),
        ))
    return out
