"""
Validators Utility
Input validation with domain exceptions
"""
import math
from typing import Type

from yarl import URL

from domain.exceptions import InvalidRequestException


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_range(
        value: float,
        min_val: float,
        max_val: float,
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> float:
        """
        Valida se valor numérico é finito e está dentro do range

        Args:
            value: Valor a validar
            min_val: Valor mínimo permitido
            max_val: Valor máximo permitido
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            Valor validado

        Raises:
            exception_class: Se valor não numérico, não finito ou fora do range
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) \
                or not (min_val <= value <= max_val):
            message = f"{param_name} must be between {min_val} and {max_val}"
            details = {param_name: value, "min": min_val, "max": max_val}
            if exception_class is ValueError:
                raise ValueError(message)
            raise exception_class(message, details=details)
        return value

    @staticmethod
    def validate_positive(
        value: float,
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> float:
        """
        Valida se valor é um número finito maior que zero

        Raises:
            exception_class: Se valor <= 0 ou não finito
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) \
                or value <= 0:
            raise exception_class(f"{param_name} must be a positive number, got {value!r}")
        return value


class ForecastRequestValidator:
    """Validate the pieces of a forecast request URL"""

    @staticmethod
    def validate_base_url(base_url: str) -> URL:
        """
        Validate the forecast endpoint

        Args:
            base_url: Absolute http(s) URL without query string

        Returns:
            Parsed yarl URL

        Raises:
            InvalidRequestException: If the URL is malformed
        """
        try:
            url = URL(base_url)
        except (TypeError, ValueError) as ex:
            raise InvalidRequestException(
                f"Malformed forecast URL: {ex}",
                details={"base_url": str(base_url)}
            ) from ex

        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidRequestException(
                "Forecast URL must be an absolute http(s) URL",
                details={"base_url": str(base_url)}
            )
        return url

    @staticmethod
    def validate_latitude(latitude: float) -> float:
        return GenericValidator.validate_range(
            value=latitude,
            min_val=-90.0,
            max_val=90.0,
            param_name="latitude",
            exception_class=InvalidRequestException
        )

    @staticmethod
    def validate_longitude(longitude: float) -> float:
        return GenericValidator.validate_range(
            value=longitude,
            min_val=-180.0,
            max_val=180.0,
            param_name="longitude",
            exception_class=InvalidRequestException
        )
