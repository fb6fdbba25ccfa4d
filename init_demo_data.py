"""
Seed a local database with demo users, a wallet and a sample order.
Prints bearer tokens for the shipper and the admin.
"""
import asyncio

from sqlalchemy import select

from agromove.core.security import create_access_token
from agromove.db.models import Order, OrderItem, User
from agromove.infrastructure.database import get_session, init_db
from agromove.modules.wallets import WalletService


async def create_demo_data():
    await init_db()

    async for db in get_session():
        shipper = (await db.execute(select(User).where(User.email == "shipper@agromove.local"))).scalars().first()
        if shipper is None:
            shipper = User(name="Demo Shipper", phone="+2348000000001", email="shipper@agromove.local", role="SHIPPER")
            admin = User(name="Demo Admin", phone="+2348000000002", email="admin@agromove.local", role="ADMIN")
            db.add_all([shipper, admin])
            await db.flush()
            db.add(
                Order(
                    shipper_id=shipper.id,
                    pickup_location="Kano",
                    destination="Lagos",
                    produce_type="Tomatoes",
                    estimated_cost_cents=2500000,
                    details_json='{"crates": 40}',
                    items=[
                        OrderItem(product_name="Tomato crate", quantity=2, price_at_purchase_cents=500),
                        OrderItem(product_name="Pepper bag", quantity=1, price_at_purchase_cents=300),
                    ],
                )
            )
        else:
            admin = (await db.execute(select(User).where(User.email == "admin@agromove.local"))).scalars().one()

        wallet = await WalletService.with_session(db).provision_wallet(shipper.id)
        await db.commit()

        print(f"Shipper {shipper.id} wallet {wallet.id} balance {wallet.balance}")
        print(f"Shipper token: {create_access_token(shipper.id, shipper.role)}")
        print(f"Admin token:   {create_access_token(admin.id, admin.role)}")


if __name__ == "__main__":
    asyncio.run(create_demo_data())
