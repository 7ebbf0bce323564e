from dependency_injector import containers, providers

from numvalid.domain.services import DecimalParser
from numvalid.domain.services.matchers import DecimalNumberMatcher
from numvalid.domain.values import MatcherConfiguration
from numvalid.shared.config import get_settings
from numvalid.shared.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _matcher_params(max_total_digits, max_decimal_places) -> tuple[int, ...]:
    configuration = MatcherConfiguration.from_limits(
        max_total_digits, max_decimal_places
    )
    return configuration.as_params()


def _build_decimal_number_matcher(
    params: tuple[int, ...], parser: DecimalParser
) -> DecimalNumberMatcher:
    return DecimalNumberMatcher(*params, parser=parser)


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    decimal_parser = providers.Singleton(DecimalParser)

    decimal_matcher_params = providers.Singleton(
        _matcher_params,
        max_total_digits=config.decimal_max_total_digits,
        max_decimal_places=config.decimal_max_decimal_places,
    )

    decimal_number_matcher = providers.Factory(
        _build_decimal_number_matcher,
        params=decimal_matcher_params,
        parser=decimal_parser,
    )


def get_container() -> Container:
    settings = get_settings()

    configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)

    container = Container()

    container.config.from_dict(
        {
            "decimal_max_total_digits": settings.DECIMAL_MAX_TOTAL_DIGITS,
            "decimal_max_decimal_places": settings.DECIMAL_MAX_DECIMAL_PLACES,
        }
    )

    logger.info(
        "di_container_configured",
        max_total_digits=settings.DECIMAL_MAX_TOTAL_DIGITS,
        max_decimal_places=settings.DECIMAL_MAX_DECIMAL_PLACES,
    )

    return container
