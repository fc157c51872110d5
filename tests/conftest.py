from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest
import requests_mock as requests_mock_lib

from weatherchat.tools.weather import FORECAST_URL, GEOCODING_URL


def _query(request) -> dict[str, str]:
    # request.url keeps the original casing; requests_mock lowercases request.qs
    return {k: v[0] for k, v in parse_qs(urlsplit(request.url).query).items()}


class OpenMeteoStub:
    """Fake geocoding + forecast endpoints.

    `places` maps (name, language) -> geocoding entry; anything else has no
    results. `failing` lists (name, language) pairs answered with HTTP 500.
    """

    def __init__(self, mocker) -> None:
        self.places: dict[tuple[str, str], dict] = {}
        self.failing: set[tuple[str, str]] = set()
        self.current: dict = {"temperature_2m": 20, "weather_code": 0, "wind_speed_10m": 5}
        self.forecast_status = 200
        self.geocode_calls: list[tuple[str, str]] = []
        self.forecast_calls: list[dict[str, str]] = []
        mocker.get(GEOCODING_URL, json=self._geocode)
        mocker.get(FORECAST_URL, json=self._forecast)

    def add_place(self, query, language, **entry) -> None:
        entry.setdefault("name", query)
        self.places[(query, language)] = entry

    def _geocode(self, request, context):
        qs = _query(request)
        key = (qs.get("name", ""), qs.get("language", ""))
        self.geocode_calls.append(key)
        if key in self.failing:
            context.status_code = 500
            return {"error": True, "reason": "boom"}
        entry = self.places.get(key)
        if not entry:
            return {"generationtime_ms": 0.4}
        return {"results": [entry, {"name": "Somewhere else", "latitude": 0.0, "longitude": 0.0}]}

    def _forecast(self, request, context):
        self.forecast_calls.append(_query(request))
        context.status_code = self.forecast_status
        if self.forecast_status != 200:
            return {"error": True, "reason": "unavailable"}
        return {"latitude": 0, "longitude": 0, "current": self.current}


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker


@pytest.fixture()
def open_meteo(requests_mock):
    return OpenMeteoStub(requests_mock)
