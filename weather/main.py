import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from typing import Optional

from . import config
from .aggregations import daily
from .clients import WeatherAPIError, WeatherClient
from .models import Observation, Units

logger = logging.getLogger(__name__)


def _as_dict(obs: Observation) -> dict:
    d = asdict(obs)
    d["timestamp"] = obs.timestamp.isoformat()
    return d


def _fmt(obs: Observation) -> str:
    return (
        f"{obs.timestamp.isoformat()}  temp={obs.temperature:.2f}  "
        f"min={obs.temperature_min:.2f}  max={obs.temperature_max:.2f}  "
        f"humidity={obs.humidity:.1f}"
    )


async def run(client: WeatherClient, zip_code: str) -> dict:
    current = await client.get_current_weather(zip_code)
    forecast = await client.get_forecast(zip_code)
    return {
        "current": current,
        "forecast": forecast,
        "daily": daily(forecast),
    }


def _print(result: dict, as_json: bool) -> None:
    if as_json:
        payload = {
            "current": _as_dict(result["current"]),
            "forecast": [_as_dict(o) for o in result["forecast"]],
            "daily": [_as_dict(o) for o in result["daily"]],
        }
        print(json.dumps(payload, indent=2))
        return
    print("Current:")
    print("  " + _fmt(result["current"]))
    print("Forecast:")
    for obs in result["forecast"]:
        print("  " + _fmt(obs))
    print("Daily:")
    for obs in result["daily"]:
        print("  " + _fmt(obs))


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Tiempo actual, previsión y resúmenes diarios para un código postal (OpenWeatherMap).")
    ap.add_argument("zip", help="Código postal, opcionalmente 'zip,país' (p. ej. 94040,us).")
    ap.add_argument("--units", choices=[u.value for u in Units], default=config.WEATHER_UNITS)
    ap.add_argument("--api-key", default=config.OPENWEATHERMAP_APIKEY, help="Por defecto $OPENWEATHERMAP_APIKEY.")
    ap.add_argument("--json", action="store_true", help="Imprime JSON en lugar de texto.")
    args = ap.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL)

    try:
        # units puede venir de WEATHER_UNITS sin pasar por choices -> ValueError
        client = WeatherClient(api_key=args.api_key, units=args.units)
        result = asyncio.run(run(client, args.zip))
    except (WeatherAPIError, ValueError) as e:
        logger.error("%s", e)
        return 1
    _print(result, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
