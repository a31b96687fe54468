#!/usr/bin/env python3
"""
Demo order generation script.

Signs in a batch of fake customers, fills their carts from the available
catalog and checks them out, so the admin dashboard has something to show.
Some of the generated orders are then marked delivered.
"""

import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path

from dotenv import load_dotenv

# Make the package importable when run from a checkout
sys.path.insert(0, str(Path(__file__).parent.parent))

from faker import Faker  # noqa: E402

from meatshop.application.dtos.order_dtos import CheckoutRequest  # noqa: E402
from meatshop.application.sessions import AdminSession, CustomerSession, sign_in  # noqa: E402
from meatshop.config import get_config  # noqa: E402
from meatshop.domain.entities.order_entity import PaymentMethod  # noqa: E402
from meatshop.infrastructure.container.dependency_injection import (  # noqa: E402
    DependencyContainer,
)
from meatshop.infrastructure.logging.logger_config import (  # noqa: E402
    LoggingConfigOptions,
    setup_logging,
)
from meatshop.infrastructure.utilities.constants import CartSettings  # noqa: E402

# Indian locale for realistic names and addresses
fake = Faker(["en_IN"])

logger = logging.getLogger("generate_demo_orders")

DELIVERED_SHARE = 0.4


def generate_checkout_request() -> CheckoutRequest:
    """Generate realistic delivery details"""
    return CheckoutRequest(
        customer_name=fake.name(),
        phone=f"9{fake.msisdn()[-9:]}",
        address=fake.address().replace("\n", ", "),
        payment_method=random.choice(list(PaymentMethod)),
    )


async def place_demo_order(container: DependencyContainer) -> str | None:
    result = await sign_in(container, fake.unique.email())
    session = result.value
    if not isinstance(session, CustomerSession):
        return None

    products = (await session.browse()).value
    for product in random.sample(products, k=random.randint(1, len(products))):
        weight = random.choice(CartSettings.WEIGHT_OPTIONS_KG) * random.randint(1, 3)
        await session.add_to_cart(product.id, weight)

    checkout = await session.checkout(generate_checkout_request())
    session.logout()
    if not checkout.success:
        logger.warning("Checkout failed: %s", checkout.message)
        return None
    return checkout.value.id


async def generate(count: int) -> int:
    container = DependencyContainer(get_config())
    order_ids = []
    for _ in range(count):
        order_id = await place_demo_order(container)
        if order_id:
            order_ids.append(order_id)

    admin_email = container.state.settings.admin_email_list()[0]
    admin = (await sign_in(container, admin_email)).value
    if isinstance(admin, AdminSession):
        for order_id in random.sample(order_ids, k=int(len(order_ids) * DELIVERED_SHARE)):
            await admin.mark_delivered(order_id)
        stats = (await admin.dashboard()).value
        logger.info(
            "✅ Generated %d orders. Store now has %d orders, %d pending, gross %.2f",
            len(order_ids),
            stats.order_count,
            stats.pending_count,
            stats.gross_sales,
        )
    return len(order_ids)


def main():
    parser = argparse.ArgumentParser(description="Place fake orders against the local store")
    parser.add_argument("--count", type=int, default=10, help="Number of orders to place")
    args = parser.parse_args()

    load_dotenv()
    config = get_config()
    setup_logging(LoggingConfigOptions(log_level=config.log_level, log_dir=config.log_dir))
    asyncio.run(generate(args.count))


if __name__ == "__main__":
    main()
