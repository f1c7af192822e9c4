import asyncio
import logging
import sys
from logging.handlers import RotatingFileHandler

from config import ConfigError, load_monitor_config, settings
from services import run_monitor


# ensure logs are recorded both to stdout and to a rotating file
def configure_logging() -> None:
    log_dir = settings.LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "monitor.log"

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            RotatingFileHandler(
                log_file,
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            ),
        ],
        force=True,
    )


configure_logging()
logger = logging.getLogger("stockwatch")


async def main() -> None:
    config = load_monitor_config(settings.CONFIG_PATH)
    logger.info(
        "Monitor starting with %s site(s), request timeout %ss",
        len(config.sites),
        settings.REQUEST_TIMEOUT,
    )
    await run_monitor(config, timeout=settings.REQUEST_TIMEOUT)


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Monitor stopped by user")
    except ConfigError as exc:
        logger.error("Fatal configuration error: %s", exc)
        sys.exit(1)
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    run()
