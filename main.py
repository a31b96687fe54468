#!/usr/bin/env python3
"""
Entry point for the meat shop storefront

Loads the stored shop, reports its state, and optionally resets storage to
the seed data.
"""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from meatshop.config import get_config  # noqa: E402
from meatshop.infrastructure.container.dependency_injection import (  # noqa: E402
    DependencyContainer,
)
from meatshop.infrastructure.logging.logger_config import (  # noqa: E402
    LoggingConfigOptions,
    setup_logging,
)
from meatshop.infrastructure.utilities.exceptions import ShopError  # noqa: E402


async def log_startup_summary(container: DependencyContainer):
    """Shop name, open state, catalog size and dashboard numbers"""
    logger = logging.getLogger(__name__)
    settings = await container.get_shop_settings_use_case().get_settings()
    products = await container.get_product_catalog_use_case().get_all_products()
    stats = await container.get_order_analytics_use_case().get_dashboard_stats()
    symbol = container.config.currency_symbol

    logger.info("🏪 %s is %s", settings.shop_name, "OPEN" if settings.is_open else "CLOSED")
    logger.info(
        "📦 %d products (%d available)",
        len(products),
        sum(1 for p in products if p.available),
    )
    logger.info(
        "📊 %d orders, %d pending, gross sales %s%.2f",
        stats.order_count,
        stats.pending_count,
        symbol,
        stats.gross_sales,
    )


def main(argv=None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Meat shop storefront")
    parser.add_argument(
        "--seed-demo", action="store_true", help="Reset storage to the seed catalog and settings"
    )
    args = parser.parse_args(argv)

    config = get_config()
    setup_logging(LoggingConfigOptions(log_level=config.log_level, log_dir=config.log_dir))
    logger = logging.getLogger(__name__)
    logger.info("🚀 Starting meat shop (%s), store at %s", config.environment, config.store_path)

    try:
        container = DependencyContainer(config)
        if args.seed_demo:
            container.reset_to_defaults()
            logger.info("🌱 Storage reset to seed data")
        asyncio.run(log_startup_summary(container))
    except ShopError as e:
        logger.error("Startup failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
