import logging


def setup_logging(level: str) -> None:
    """
    Minimal logging setup.
    - Level name comes from settings (APP_LOG_LEVEL).
    - Configures a single console handler via logging.basicConfig.
    """
    # Fallback to INFO if user passes something weird
    level_value = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
