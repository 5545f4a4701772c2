"""
Testes Unitários - Decodificação tipada da resposta Open-Meteo
"""
import copy

import pytest

from domain.entities.forecast_response import RawForecastResponse, RawHourly


class TestRawForecastResponse:
    """Decodificação tudo-ou-nada do documento horário"""

    def test_decode_valid_document(self, openmeteo_payload):
        raw = RawForecastResponse.from_api_response(openmeteo_payload)

        assert raw.latitude == 52.52
        assert raw.longitude == pytest.approx(13.419998)
        assert raw.hourly.time == ("2025-01-01T00:00", "2025-01-01T01:00", "2025-01-01T02:00")
        assert raw.hourly.temperature == (1.5, 1.2, 0.9)

    def test_integer_temperatures_become_floats(self, openmeteo_payload):
        openmeteo_payload["hourly"]["temperature_2m"] = [1, 2, 3]

        raw = RawForecastResponse.from_api_response(openmeteo_payload)

        assert raw.hourly.temperature == (1.0, 2.0, 3.0)
        assert all(isinstance(v, float) for v in raw.hourly.temperature)

    def test_optional_fields_are_ignored(self):
        raw = RawForecastResponse.from_api_response({
            "latitude": 0,
            "longitude": 0,
            "hourly": {"time": [], "temperature_2m": []}
        })

        assert raw.hourly.usable_length == 0

    @pytest.mark.parametrize("missing", ["latitude", "longitude", "hourly"])
    def test_missing_top_level_field(self, openmeteo_payload, missing):
        del openmeteo_payload[missing]

        with pytest.raises(KeyError, match=missing):
            RawForecastResponse.from_api_response(openmeteo_payload)

    @pytest.mark.parametrize("missing", ["time", "temperature_2m"])
    def test_missing_hourly_field(self, openmeteo_payload, missing):
        del openmeteo_payload["hourly"][missing]

        with pytest.raises(KeyError, match=f"hourly.{missing}"):
            RawForecastResponse.from_api_response(openmeteo_payload)

    def test_null_temperature_rejects_document(self, openmeteo_payload):
        openmeteo_payload["hourly"]["temperature_2m"][1] = None

        with pytest.raises(TypeError, match=r"temperature_2m\[1\]"):
            RawForecastResponse.from_api_response(openmeteo_payload)

    def test_boolean_is_not_a_number(self, openmeteo_payload):
        openmeteo_payload["latitude"] = True

        with pytest.raises(TypeError, match="latitude"):
            RawForecastResponse.from_api_response(openmeteo_payload)

    def test_non_string_timestamp_rejects_document(self, openmeteo_payload):
        openmeteo_payload["hourly"]["time"][0] = 1735689600

        with pytest.raises(TypeError, match=r"time\[0\]"):
            RawForecastResponse.from_api_response(openmeteo_payload)

    def test_hourly_arrays_must_be_lists(self, openmeteo_payload):
        openmeteo_payload["hourly"]["time"] = "2025-01-01T00:00"

        with pytest.raises(TypeError, match="array"):
            RawForecastResponse.from_api_response(openmeteo_payload)

    def test_document_must_be_an_object(self):
        with pytest.raises(TypeError):
            RawForecastResponse.from_api_response(["not", "an", "object"])

    def test_to_dict_matches_api_shape(self, openmeteo_payload):
        raw = RawForecastResponse.from_api_response(copy.deepcopy(openmeteo_payload))

        assert raw.to_dict() == {
            "latitude": openmeteo_payload["latitude"],
            "longitude": openmeteo_payload["longitude"],
            "hourly": openmeteo_payload["hourly"]
        }


class TestRawHourly:
    """Comprimentos divergentes: apenas o prefixo comum é utilizável"""

    def test_usable_length_is_shorter_array(self):
        hourly = RawHourly(time=("a", "b", "c"), temperature=(1.0, 2.0))

        assert hourly.usable_length == 2
