import io

from models.enums import LogCategory, LogLevel
from utils.enum_helper import EnumHelper
from utils.logger import Logger, configure_logger, get_logger


def test_bound_logger_writes_category_and_details():
    out = io.StringIO()
    logger = Logger(LogLevel.DEBUG, use_colors=False, stream=out)

    logger.for_category(LogCategory.GRID).info("Addressing ready", wiring="serpentine", pixels=64)

    lines = out.getvalue().splitlines()
    assert "GRID" in lines[0]
    assert "✓ Addressing ready" in lines[0]
    assert lines[1].strip() == "├─ wiring: serpentine"
    assert lines[2].strip() == "└─ pixels: 64"


def test_min_level_filters():
    out = io.StringIO()
    logger = Logger(LogLevel.WARN, use_colors=False, stream=out)

    logger.info(LogCategory.SYSTEM, "hidden")
    logger.error(LogCategory.SYSTEM, "shown")

    assert "hidden" not in out.getvalue()
    assert "shown" in out.getvalue()


def test_configure_logger_redirects_existing_bound_loggers():
    out = io.StringIO()
    bound = get_logger().for_category(LogCategory.EXPORT)

    configure_logger(LogLevel.INFO, use_colors=False, stream=out)
    try:
        bound.info("moved to stderr")
    finally:
        configure_logger(LogLevel.INFO, use_colors=True, stream=None)

    assert "moved to stderr" in out.getvalue()


def test_enum_helper_accepts_values_and_names():
    assert EnumHelper.parse(LogLevel, "warn") == LogLevel.WARN
    assert EnumHelper.parse(LogLevel, LogLevel.ERROR) == LogLevel.ERROR
    assert EnumHelper.parse(LogCategory, "Grid") == LogCategory.GRID
