from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .cli.console import ConsoleApp
from .container import build_container

logger = logging.getLogger(__name__)


def main() -> None:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    # Logs go to stderr so they never interleave with the menu on stdout.
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "WARNING"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.debug("settings=%s debug=%s", settings_module, bool(getattr(settings, "DEBUG", False)))

    container = build_container(settings=settings)
    if getattr(settings, "SEED_DEMO_EMPLOYEES", False):
        logger.debug("demo employees ready (%d)", len(container.employee_service.list_employees()))

    ConsoleApp(container).run()


if __name__ == "__main__":
    main()
