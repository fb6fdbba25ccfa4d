"""Order lifecycle service tests.

Tests cover:
    - Active listing: status filter, newest-first order, pagination, totals
    - Detail view with derived totals and user summaries
    - Status updates: parsing, idempotent timestamps, notification emission
    - Strict transition policy
"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from agromove.core.errors import InvalidArgumentError
from agromove.db.models import Notification
from agromove.infrastructure.database.repositories import SqlNotificationRepository, SqlOrderRepository
from agromove.modules.notifications import NotificationService
from agromove.modules.orders import (
    InvalidOrderStatusError,
    InvalidStatusTransitionError,
    OrderLifecycleService,
    OrderNotFoundError,
    OrderStatus,
    StrictTransitionPolicy,
)
from tests.factories import make_order, make_user

T0 = datetime(2026, 10, 17, 10, 0, 0)


def _service(session, **kwargs) -> OrderLifecycleService:
    return OrderLifecycleService(
        repository=SqlOrderRepository(session),
        notifications=NotificationService(SqlNotificationRepository(session), clock=lambda: T0),
        **kwargs,
    )


async def _notification_count(session, order_id: str) -> int:
    stmt = select(func.count()).select_from(Notification).where(Notification.related_order_id == order_id)
    return (await session.execute(stmt)).scalar_one()


@pytest.fixture
async def shipper(db_session):
    return await make_user(db_session, name="Bola Shipper")


@pytest.mark.asyncio
async def test_active_listing_excludes_finished_orders(db_session, shipper):
    base = datetime(2026, 10, 1)
    for offset, status in enumerate(["Pending", "Accepted", "InTransit", "Cleared", "Delivered", "Cancelled"]):
        await make_order(db_session, shipper, status=status, created_at=base + timedelta(hours=offset))

    page = await _service(db_session).list_active_orders()

    assert page.total == 4
    assert [item.status for item in page.items] == [
        OrderStatus.CLEARED,
        OrderStatus.IN_TRANSIT,
        OrderStatus.ACCEPTED,
        OrderStatus.PENDING,
    ]


@pytest.mark.asyncio
async def test_active_listing_paginates(db_session, shipper):
    base = datetime(2026, 10, 1)
    orders = [
        await make_order(db_session, shipper, created_at=base + timedelta(minutes=n)) for n in range(5)
    ]

    service = _service(db_session)
    first = await service.list_active_orders(page=1, size=2)
    last = await service.list_active_orders(page=3, size=2)

    assert first.total == 5 and first.page == 1 and first.size == 2
    assert [item.id for item in first.items] == [orders[4].id, orders[3].id]
    assert [item.id for item in last.items] == [orders[0].id]


@pytest.mark.asyncio
@pytest.mark.parametrize("page,size", [(0, 10), (1, 0), (1, 201)])
async def test_active_listing_rejects_bad_paging(db_session, page, size):
    with pytest.raises(InvalidArgumentError):
        await _service(db_session).list_active_orders(page=page, size=size)


@pytest.mark.asyncio
async def test_listing_computes_totals_from_line_items(db_session, shipper):
    await make_order(
        db_session,
        shipper,
        produce_type="Tomatoes",
        estimated_cost_cents=99900,
        items=[("Tomato crate", 2, 500), ("Pepper bag", 1, 300)],
    )

    item = (await _service(db_session).list_active_orders()).items[0]

    assert item.total_payable == Decimal("13.00")
    assert item.marketplace_summary == "2x Tomato crate, 1x Pepper bag"
    assert item.estimated_cost == Decimal("999.00")
    assert item.sender_name == "Bola Shipper"


@pytest.mark.asyncio
async def test_detail_falls_back_to_quoted_cost(db_session, shipper):
    driver = await make_user(db_session, name="Musa Driver", role="DRIVER", phone="+2348111111111")
    order = await make_order(
        db_session,
        shipper,
        driver_id=driver.id,
        estimated_cost_cents=2500000,
        details_json="{not json",
    )

    detail = await _service(db_session).get_order_detail(order.id)

    assert detail.total_payable == Decimal("25000.00")
    assert detail.marketplace_summary == "Logistics Service"
    assert detail.shipper.name == "Bola Shipper"
    assert detail.driver.phone == "+2348111111111"
    assert detail.details == {}
    assert detail.recommended_vehicle == ""
    assert detail.accepted_at is None


@pytest.mark.asyncio
async def test_detail_of_missing_order_is_not_found(db_session):
    with pytest.raises(OrderNotFoundError):
        await _service(db_session).get_order_detail("missing")


@pytest.mark.asyncio
async def test_unknown_status_name_is_rejected(db_session, shipper):
    order = await make_order(db_session, shipper)
    with pytest.raises(InvalidOrderStatusError):
        await _service(db_session).update_status(order.id, "Lost")


@pytest.mark.asyncio
async def test_update_status_of_missing_order_is_not_found(db_session):
    with pytest.raises(OrderNotFoundError):
        await _service(db_session).update_status("missing", "Accepted")


@pytest.mark.asyncio
async def test_accepting_twice_notifies_once_and_keeps_first_timestamp(db_session, shipper):
    order = await make_order(db_session, shipper, produce_type="Yams")
    service = _service(db_session, clock=lambda: T0)

    first = await service.update_status(order.id, "Accepted")
    service.clock = lambda: T0 + timedelta(hours=2)
    second = await service.update_status(order.id, "accepted")

    assert first.previous is OrderStatus.PENDING
    assert first.current is OrderStatus.ACCEPTED
    assert first.notification_id is not None
    assert second.changed is False
    assert second.notification_id is None

    detail = await service.get_order_detail(order.id)
    assert detail.status is OrderStatus.ACCEPTED
    assert detail.accepted_at == T0
    assert await _notification_count(db_session, order.id) == 1

    [notification] = await service.notifications.list_for_user(shipper.id)
    assert notification.title == "Order Status Update"
    assert notification.type == "ORDER_UPDATE"
    assert notification.message == "Your order for Yams is now Accepted."
    assert notification.is_read is False


@pytest.mark.asyncio
async def test_status_names_are_case_insensitive(db_session, shipper):
    order = await make_order(db_session, shipper)
    service = _service(db_session, clock=lambda: T0)

    change = await service.update_status(order.id, "  inTRANSIT ")

    assert change.current is OrderStatus.IN_TRANSIT
    detail = await service.get_order_detail(order.id)
    assert detail.in_transit_at == T0
    [notification] = await service.notifications.list_for_user(shipper.id)
    assert notification.message == "Your order for cargo is now InTransit."


@pytest.mark.asyncio
async def test_reentering_a_status_keeps_its_history(db_session, shipper):
    order = await make_order(db_session, shipper)
    service = _service(db_session, clock=lambda: T0)
    await service.update_status(order.id, "Accepted")

    service.clock = lambda: T0 + timedelta(days=1)
    await service.update_status(order.id, "InTransit")
    await service.update_status(order.id, "Accepted")

    detail = await service.get_order_detail(order.id)
    assert detail.accepted_at == T0
    assert detail.in_transit_at == T0 + timedelta(days=1)
    assert await _notification_count(db_session, order.id) == 3


@pytest.mark.asyncio
async def test_order_without_shipper_gets_no_notification(db_session):
    order = await make_order(db_session, None)

    change = await _service(db_session).update_status(order.id, "Cancelled")

    assert change.notification_id is None
    assert await _notification_count(db_session, order.id) == 0
    detail = await _service(db_session).get_order_detail(order.id)
    assert detail.cancelled_at is not None


@pytest.mark.asyncio
async def test_delivered_order_leaves_active_listing(db_session, shipper):
    order = await make_order(db_session, shipper)
    service = _service(db_session)

    await service.update_status(order.id, "Delivered")

    assert (await service.list_active_orders()).total == 0


@pytest.mark.asyncio
async def test_default_policy_allows_any_move(db_session, shipper):
    order = await make_order(db_session, shipper, status="Delivered")

    change = await _service(db_session).update_status(order.id, "Pending")

    assert change.current is OrderStatus.PENDING


@pytest.mark.asyncio
async def test_strict_policy_blocks_reopening_delivered_orders(db_session, shipper):
    order = await make_order(db_session, shipper, status="Delivered")
    service = _service(db_session, policy=StrictTransitionPolicy())

    with pytest.raises(InvalidStatusTransitionError):
        await service.update_status(order.id, "Pending")

    change = await service.update_status(order.id, "Delivered")
    assert change.changed is False
    assert await _notification_count(db_session, order.id) == 0


@pytest.mark.asyncio
async def test_configured_default_page_size_applies(db_session, shipper):
    for n in range(3):
        await make_order(db_session, shipper, created_at=datetime(2026, 10, 1) + timedelta(minutes=n))

    page = await _service(db_session, default_page_size=2).list_active_orders()

    assert page.size == 2
    assert len(page.items) == 2
    assert page.total == 3
