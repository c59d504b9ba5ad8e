"""Demo entry point: capture a few messages and an exception, print the payloads."""

import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from debugbar import (
    CollectorLogHandler,
    create_exceptions_collector,
    create_messages_collector,
    load_settings,
)
from debugbar.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


class OrderError(Exception):
    """Raised when an order cannot be placed."""


def _load_order(order_id: int) -> dict:
    raise KeyError(f"order {order_id} not found")


def _place_order(order_id: int) -> None:
    try:
        _load_order(order_id)
    except KeyError as e:
        raise OrderError("could not place order") from e


def main():
    """Run the demo."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")
    setup_logging()

    settings = load_settings()
    messages = create_messages_collector(settings=settings)
    queries = create_messages_collector("queries", settings=settings)
    messages.aggregate(queries)
    exceptions = create_exceptions_collector(settings)

    app_logger = logging.getLogger("demo.app")
    app_logger.setLevel(logging.DEBUG)
    app_logger.addHandler(CollectorLogHandler(messages))

    messages.info("Request started for {user}", {"user": "ada"})
    queries.add_message("SELECT * FROM orders WHERE id = 42", "sql")
    messages.debug({"cart": [1, 2, 3], "total": 12.5})
    app_logger.warning("Inventory low for %s", "sku-17")

    try:
        _place_order(42)
    except OrderError as e:
        exceptions.add_throwable(e)
        messages.error("Order {id} failed: {error}", {"id": 42, "error": e})

    logger.info("Collected %d messages", len(messages.get_messages()))
    print(
        json.dumps(
            {
                messages.name: messages.collect().model_dump(),
                exceptions.name: exceptions.collect().model_dump(),
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    main()
