"""Series Transformer - Converte pares (timestamp, temperatura) em ForecastSeries"""
from domain.entities.forecast_response import RawForecastResponse
from domain.entities.forecast_series import ForecastPoint, ForecastSeries
from domain.exceptions import InvalidDateTimeException
from shared.config.logger_config import get_logger
from shared.utils.datetime_parser import DateTimeParser

logger = get_logger(child=True)


class SeriesTransformer:
    """
    Transforma a resposta bruta em uma série pronta para gráfico

    Função pura: nunca falha. Timestamps malformados são registrados em
    log e descartados sem abortar a série.
    """

    @staticmethod
    def to_series(raw: RawForecastResponse) -> ForecastSeries:
        """
        Converte arrays paralelos em ForecastSeries

        ESTRATÉGIA:
        1. Percorre os pares posicionais até o menor tamanho
        2. Timestamp inválido: log do índice e do valor, segue adiante
        3. Preserva a ordem de entrada (sem ordenar nem deduplicar)

        Args:
            raw: Resposta decodificada da Open-Meteo

        Returns:
            ForecastSeries (possivelmente menor que a entrada, ou vazia)
        """
        hourly = raw.hourly
        if len(hourly.time) != len(hourly.temperature):
            logger.warning(
                "Hourly arrays differ in length, using common prefix",
                time_count=len(hourly.time),
                temperature_count=len(hourly.temperature),
                usable=hourly.usable_length
            )

        points = []
        skipped = []
        for index, (raw_time, temperature) in enumerate(zip(hourly.time, hourly.temperature)):
            try:
                instant = DateTimeParser.to_epoch_seconds(raw_time)
            except InvalidDateTimeException as e:
                logger.warning(
                    "Skipping unparseable timestamp",
                    index=index,
                    raw_value=raw_time,
                    error=str(e)
                )
                skipped.append(index)
                continue

            points.append(ForecastPoint(instant=instant, value=temperature))

        logger.debug(
            "Forecast series built",
            input_count=hourly.usable_length,
            output_count=len(points),
            skipped_indices=skipped
        )
        return ForecastSeries(points)


def to_series(raw: RawForecastResponse) -> ForecastSeries:
    return SeriesTransformer.to_series(raw)
