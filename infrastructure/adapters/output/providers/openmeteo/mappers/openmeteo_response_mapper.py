"""
OpenMeteo Response Mapper - Transforma o corpo da API Open-Meteo em entity
LOCALIZAÇÃO: infrastructure (conhece o formato externo → domínio)
"""
import json
from decimal import Decimal
from typing import Any, Dict

from domain.constants import API
from domain.entities.forecast_response import RawForecastResponse
from domain.exceptions import DecodeFailedException
from domain.value_objects.coordinates import Coordinates


class OpenMeteoResponseMapper:
    """
    Mapper entre o contrato HTTP da Open-Meteo e o domínio

    Responsabilidade: parâmetros de consulta e decodificação do corpo
    Decodificação tudo-ou-nada: sem fallback parcial
    """

    @staticmethod
    def build_query_params(coordinates: Coordinates) -> Dict[str, str]:
        """
        Parâmetros de consulta da previsão horária

        Latitude/longitude em notação decimal (repr do float), sem
        notação científica nem arredondamento.
        """
        return {
            'latitude': OpenMeteoResponseMapper._decimal(coordinates.latitude),
            'longitude': OpenMeteoResponseMapper._decimal(coordinates.longitude),
            'hourly': API.HOURLY_VARIABLE
        }

    @staticmethod
    def _decimal(value: float) -> str:
        # repr: menor texto que volta ao mesmo float
        return format(Decimal(repr(float(value))), 'f')

    @staticmethod
    def parse_json(body: bytes) -> Any:
        """
        Desserializa o corpo JSON

        Raises:
            DecodeFailedException: Corpo não é UTF-8 ou JSON válido
        """
        try:
            return json.loads(body.decode('utf-8'))
        except (UnicodeDecodeError, ValueError) as ex:
            raise DecodeFailedException(
                "Response body is not valid JSON",
                details={"error": str(ex), "bytes": len(body)}
            ) from ex

    @staticmethod
    def map_body_to_response(body: bytes) -> RawForecastResponse:
        """
        Decodifica o corpo HTTP em RawForecastResponse

        Args:
            body: Corpo bruto (não vazio)

        Returns:
            RawForecastResponse

        Raises:
            DecodeFailedException: JSON malformado, campo ausente ou tipo errado
        """
        data = OpenMeteoResponseMapper.parse_json(body)
        return OpenMeteoResponseMapper.map_data_to_response(data)

    @staticmethod
    def map_data_to_response(data: Any) -> RawForecastResponse:
        """
        Decodificação tipada de um documento já desserializado

        Raises:
            DecodeFailedException: Campo ausente ou tipo errado
        """
        try:
            return RawForecastResponse.from_api_response(data)
        except (KeyError, TypeError, ValueError) as ex:
            details = {"error": str(ex)}
            # Open-Meteo responde {"error": true, "reason": "..."} em 4xx
            if isinstance(data, dict) and data.get('error') is True:
                details["reason"] = data.get('reason')
            raise DecodeFailedException(
                "Response is not a valid forecast document",
                details=details
            ) from ex
