import logging
import os


def configure_logging(level=None):
    """Configure root logging from LOG_LEVEL unless a level is given."""
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # basicConfig leaves the level alone once the root logger has handlers
    logging.getLogger().setLevel(log_level)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def main():
    # Logging is configured by the CLI callback so --log-level applies.
    from repoforge.cli import app

    app()


if __name__ == "__main__":
    main()
