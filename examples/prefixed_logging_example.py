"""
Prefixed Formatter usage examples
"""

from prefixed_formatter import (
    ColorPalette,
    FormatterConfig,
    get_logger,
    log_with_context,
)


def main():
    config = FormatterConfig(
        force_colors=True,
        log_level="DEBUG",
        colors=ColorPalette(info="green+b", prefix="208"),
    )
    logger = get_logger("example", config)

    log_with_context(logger, "info", "[worker] started job", job_id="a-42")
    log_with_context(logger, "debug", "Polling queue", prefix="scheduler", depth=3)
    log_with_context(logger, "warning", "Slow response", latency="1.5 s")

    try:
        raise ConnectionError("connection refused")
    except ConnectionError:
        logger.error("Upload failed", exc_info=True, extra={"ctx_host": "db.local"})

    plain = get_logger("plain_example", FormatterConfig(disable_colors=True))
    log_with_context(plain, "info", "Shipping logs", target="file", time="user value")


if __name__ == "__main__":
    main()
