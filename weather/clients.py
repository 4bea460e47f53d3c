import logging
from datetime import datetime
from typing import Any, Optional

import httpx

from .aggregations import daily
from .config import ClientConfig
from .models import Forecast, Observation, Units

logger = logging.getLogger(__name__)


class WeatherAPIError(RuntimeError):
    """Error de la API (o de la red) con el código HTTP asociado."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class WeatherClient:
    """
    Cliente mínimo de OpenWeatherMap.
    - una petición por llamada, sin reintentos ni caché
    - 200 -> JSON decodificado
    - cualquier otro código -> WeatherAPIError con ese código y el cuerpo
    - errores de red -> WeatherAPIError(503)
    """

    def __init__(self, config: Optional[ClientConfig] = None, **options):
        config = config or ClientConfig()
        self.config = config.replace(**options) if options else config

    async def _request(self, endpoint: str, params: dict[str, Any]) -> dict:
        query = dict(params)
        query["APPID"] = self.config.api_key
        if self.config.units != Units.KELVIN:
            query["units"] = self.config.units.value

        logger.debug("GET %s%s params=%s", self.config.base_url, endpoint, params)
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                r = await client.get(f"{self.config.base_url}{endpoint}", params=query)
        except httpx.RequestError as e:
            logger.warning("Fallo en la petición a %s: %s", endpoint, e)
            raise WeatherAPIError(503, f"OpenWeatherMap no disponible: {e}") from e

        if r.status_code != 200:
            logger.warning("OpenWeatherMap devolvió %s para %s: %s", r.status_code, endpoint, r.text)
            raise WeatherAPIError(r.status_code, r.text)

        try:
            data = r.json()
        except ValueError as e:
            raise WeatherAPIError(502, f"JSON inválido desde {endpoint}") from e
        # JSON válido pero no objeto (lista, null...) -> también 502
        if not isinstance(data, dict):
            raise WeatherAPIError(502, f"Respuesta inesperada desde {endpoint}: se esperaba un objeto")
        return data

    def _to_datetime(self, ts: int) -> datetime:
        if self.config.tz is not None:
            return datetime.fromtimestamp(ts, tz=self.config.tz)
        # zona local del sistema, pero siempre con offset resuelto
        return datetime.fromtimestamp(ts).astimezone()

    def _to_observation(self, item: dict) -> Observation:
        try:
            main = item["main"]
            return Observation(
                timestamp=self._to_datetime(int(item["dt"])),
                temperature=float(main["temp"]),
                temperature_min=float(main["temp_min"]),
                temperature_max=float(main["temp_max"]),
                humidity=float(main["humidity"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise WeatherAPIError(502, f"Respuesta inesperada: {e!r}") from e

    async def get_forecast(self, zip_code: str) -> Forecast:
        data = await self._request("forecast", {"zip": zip_code})
        items = data.get("list")
        if not isinstance(items, list):
            raise WeatherAPIError(502, "Respuesta inesperada: falta 'list'")
        return [self._to_observation(it) for it in items]

    async def get_current_weather(self, zip_code: str) -> Observation:
        data = await self._request("weather", {"zip": zip_code})
        return self._to_observation(data)

    async def get_daily_forecast(self, zip_code: str) -> Forecast:
        return daily(await self.get_forecast(zip_code))
