"""Script to initialize the database for local development."""

import asyncio
from decimal import Decimal

from sqlalchemy import func, select, text

from accessgate.database import engine
from accessgate.models import metadata
from accessgate.models.subscriptions import subscription_plans

DEFAULT_PLANS = [
    {
        "name": "Essential",
        "description": "Credit report analysis and up to 5 disputes per month",
        "price_monthly": Decimal("79.00"),
        "sort_order": 1,
    },
    {
        "name": "Professional",
        "description": "Unlimited disputes, AI analysis and credit monitoring",
        "price_monthly": Decimal("129.00"),
        "sort_order": 2,
    },
]


async def init_db() -> None:
    """Create all tables and seed the plan catalogue if it is empty."""
    async with engine.begin() as conn:
        # Enable pgcrypto extension
        await conn.execute(text('CREATE EXTENSION IF NOT EXISTS "pgcrypto"'))

        # Create all tables
        await conn.run_sync(metadata.create_all)

        plan_count = (
            await conn.execute(select(func.count()).select_from(subscription_plans))
        ).scalar_one()
        if plan_count == 0:
            await conn.execute(subscription_plans.insert(), DEFAULT_PLANS)
            print(f"✓ Seeded {len(DEFAULT_PLANS)} subscription plans")

        print("✓ Database initialized successfully!")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(init_db())
