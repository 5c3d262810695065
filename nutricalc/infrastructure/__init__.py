"""Infrastructure layer: configuration, logging and boundary adapters.

The first get_calculation_pipeline() call loads ./.env. An application
entry point should call configure_logging() once at startup, before the
first calculation, so structlog uses the NUTRICALC_LOG_LEVEL and
NUTRICALC_LOG_FORMAT settings.
"""
