"""Checkout and order fulfilment."""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import timedelta
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.common.pagination import PageParams, paginate_query
from trendiwear_api.core.auth.errors import PermissionDeniedError
from trendiwear_api.core.http.dependencies import is_admin
from trendiwear_api.db import utc_now
from trendiwear_api.features.notifications.service import NotificationsService
from trendiwear_api.models import (
    Address,
    CartItem,
    Coupon,
    DeliveryConfirmation,
    NotificationType,
    Order,
    OrderItem,
    OrderStatus,
    PaymentEscrow,
    Product,
    ProfessionalProfile,
    User,
    UserRole,
)
from trendiwear_api.settings import Settings

from .pricing import coupon_applies, coupon_discount, order_totals
from .schemas import OrderCreate, OrderOut, OrderPage, OrderUpdate

logger = logging.getLogger(__name__)


class OrdersService:
    def __init__(
        self,
        *,
        session: AsyncSession,
        settings: Settings,
        notifications: NotificationsService | None = None,
    ) -> None:
        self._session = session
        self._settings = settings
        self._notifications = notifications or NotificationsService(session=session)

    async def list_orders(
        self,
        *,
        user: User,
        params: PageParams,
        status_filter: OrderStatus | None = None,
    ) -> OrderPage:
        """Customers see their orders; professionals also orders holding their items."""

        logger.debug(
            "orders.list.start",
            extra=log_context(user_id=str(user.id), page=params.page, limit=params.limit),
        )

        stmt = select(Order)
        if UserRole(user.role) is UserRole.PROFESSIONAL:
            sells = (
                select(OrderItem.id)
                .where(OrderItem.order_id == Order.id, OrderItem.professional_id == user.id)
                .exists()
            )
            stmt = stmt.where(or_(sells, Order.customer_id == user.id))
        elif not is_admin(user):
            stmt = stmt.where(Order.customer_id == user.id)
        if status_filter is not None:
            stmt = stmt.where(Order.status == OrderStatus(status_filter))

        result = await paginate_query(
            self._session,
            stmt,
            params=params,
            order_by=[Order.created_at.desc(), Order.id],
        )
        items = [OrderOut.model_validate(row) for row in result.rows]
        logger.info(
            "orders.list.success",
            extra=log_context(
                user_id=str(user.id), count=len(items), total=result.pagination.total
            ),
        )
        return OrderPage(items=items, pagination=result.pagination)

    async def create_order(self, *, user: User, payload: OrderCreate) -> OrderOut:
        """Price and place an order, reserving stock and holding funds in escrow.

        Every write happens in the request transaction: a rejected line leaves
        stock, carts and escrows untouched.
        """

        logger.debug(
            "orders.create.start",
            extra=log_context(user_id=str(user.id), lines=len(payload.items)),
        )

        address = (
            await self._session.execute(
                select(Address).where(Address.id == payload.address_id, Address.user_id == user.id)
            )
        ).scalar_one_or_none()
        if address is None:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Invalid address")

        products = await self._lock_products({line.product_id for line in payload.items})
        requested: dict[UUID, int] = defaultdict(int)
        for line in payload.items:
            requested[line.product_id] += line.quantity
        for product_id, quantity in requested.items():
            product = products.get(product_id)
            if product is None or not product.is_available:
                raise HTTPException(
                    status.HTTP_400_BAD_REQUEST,
                    detail=f"Product {product_id} is not available",
                )
            if product.stock_quantity < quantity:
                raise HTTPException(
                    status.HTTP_400_BAD_REQUEST,
                    detail=f"Insufficient stock for {product.name}",
                )

        per_professional: dict[UUID, float] = defaultdict(float)
        for line in payload.items:
            product = products[line.product_id]
            per_professional[product.professional_id] += product.price * line.quantity
        subtotal = sum(per_professional.values())
        shipping_cost = await self._shipping_cost(per_professional, payload.delivery_zone)

        discount = 0.0
        coupon_code: str | None = None
        if payload.coupon_code:
            coupon = await self._coupon(payload.coupon_code, subtotal=subtotal)
            discount = coupon_discount(coupon, subtotal=subtotal, shipping_cost=shipping_cost)
            coupon_code = coupon.code
        totals = order_totals(
            subtotal=subtotal,
            shipping_cost=shipping_cost,
            discount=discount,
            tax_rate=self._settings.tax_rate,
        )

        order = Order(
            customer_id=user.id,
            address_id=address.id,
            subtotal=totals.subtotal,
            shipping_cost=totals.shipping_cost,
            discount=totals.discount,
            tax=totals.tax,
            total_price=totals.total_price,
            delivery_zone=payload.delivery_zone,
            coupon_code=coupon_code,
            notes=payload.notes,
        )
        for line in payload.items:
            product = products[line.product_id]
            order.items.append(
                OrderItem(
                    product_id=product.id,
                    professional_id=product.professional_id,
                    quantity=line.quantity,
                    size=line.size,
                    color=line.color,
                    price=product.price,
                    notes=line.notes,
                )
            )
        release_date = utc_now() + timedelta(days=self._settings.escrow_release_days)
        for professional_id, amount in per_professional.items():
            order.escrows.append(
                PaymentEscrow(
                    professional_id=professional_id,
                    amount=round(amount, 2),
                    release_date=release_date,
                )
            )
        self._session.add(order)

        for product_id, quantity in requested.items():
            product = products[product_id]
            product.stock_quantity -= quantity
            product.sold_count += quantity
            if product.stock_quantity <= 0:
                product.is_in_stock = False

        await self._session.execute(
            delete(CartItem).where(
                CartItem.user_id == user.id,
                CartItem.product_id.in_(list(requested)),
            )
        )
        await self._session.flush()
        await self._notify_placed(order, sorted(per_professional, key=str))

        logger.info(
            "orders.create.success",
            extra=log_context(
                user_id=str(user.id),
                order_id=str(order.id),
                total_price=totals.total_price,
                professionals=len(per_professional),
            ),
        )
        return await self._fresh(order.id)

    async def get_order(self, *, order_id: UUID, user: User) -> OrderOut:
        order = await self._get_or_404(order_id)
        sells = any(item.professional_id == user.id for item in order.items)
        if order.customer_id != user.id and not sells and not is_admin(user):
            raise PermissionDeniedError("Forbidden")
        return OrderOut.model_validate(order)

    async def update_order(self, *, order_id: UUID, payload: OrderUpdate, actor: User) -> OrderOut:
        order = await self._get_or_404(order_id)
        sells = any(item.professional_id == actor.id for item in order.items)
        if not sells and not is_admin(actor):
            raise PermissionDeniedError("Forbidden")

        updates = payload.model_dump(exclude_unset=True)
        if updates.get("tracking_number"):
            order.tracking_number = updates["tracking_number"]
        if updates.get("notes"):
            order.notes = updates["notes"]
        if updates.get("status") is not None:
            new_status = OrderStatus(updates["status"])
            if new_status is OrderStatus.DELIVERED and order.actual_delivery is None:
                await self._confirm_delivery(order, actor)
            if new_status is not OrderStatus(order.status):
                order.status = new_status
                await self._notifications.notify(
                    user_id=order.customer_id,
                    type=NotificationType.ORDER_UPDATE,
                    title="Order update",
                    message=f"Your order is now {new_status.value.lower()}.",
                    data={"orderId": str(order.id), "status": new_status.value},
                )
        await self._session.flush()

        logger.info(
            "orders.update.success",
            extra=log_context(
                order_id=str(order.id),
                user_id=str(actor.id),
                status=OrderStatus(order.status).value,
            ),
        )
        return await self._fresh(order.id)

    async def _notify_placed(self, order: Order, professional_ids: list[UUID]) -> None:
        data = {"orderId": str(order.id)}
        await self._notifications.notify(
            user_id=order.customer_id,
            type=NotificationType.ORDER_UPDATE,
            title="Order placed",
            message=f"We received your order totalling {order.total_price:.2f}.",
            data=data,
        )
        for professional_id in professional_ids:
            await self._notifications.notify(
                user_id=professional_id,
                type=NotificationType.ORDER_UPDATE,
                title="New order",
                message="A customer ordered your products.",
                data=data,
            )

    async def _confirm_delivery(self, order: Order, actor: User) -> None:
        delivered_at = utc_now()
        order.actual_delivery = delivered_at
        existing = await self._session.execute(
            select(DeliveryConfirmation.id).where(DeliveryConfirmation.order_id == order.id)
        )
        if existing.first() is None:
            self._session.add(
                DeliveryConfirmation(
                    order_id=order.id, confirmed_by=actor.id, delivered_at=delivered_at
                )
            )

    async def _lock_products(self, product_ids: set[UUID]) -> dict[UUID, Product]:
        stmt = select(Product).where(Product.id.in_(list(product_ids))).with_for_update()
        rows = (await self._session.execute(stmt)).scalars().all()
        return {product.id: product for product in rows}

    async def _shipping_cost(
        self, per_professional: dict[UUID, float], zone_name: str | None
    ) -> float:
        """Sum each professional's fee for ``zone_name``, waived above their threshold."""

        if not zone_name:
            return 0.0
        stmt = select(ProfessionalProfile).where(
            ProfessionalProfile.user_id.in_(list(per_professional))
        )
        profiles = (await self._session.execute(stmt)).scalars().all()

        shipping = 0.0
        for profile in profiles:
            zone = next(
                (zone for zone in profile.delivery_zones if zone.zone_name == zone_name), None
            )
            if zone is None:
                continue
            threshold = profile.free_delivery_threshold
            if threshold and per_professional[profile.user_id] >= threshold:
                continue
            shipping += zone.delivery_fee
        return shipping

    async def _coupon(self, code: str, *, subtotal: float) -> Coupon:
        stmt = select(Coupon).where(func.upper(Coupon.code) == code.strip().upper())
        coupon = (await self._session.execute(stmt)).scalar_one_or_none()
        if coupon is None or not coupon_applies(coupon, subtotal=subtotal, now=utc_now()):
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST, detail="Coupon is invalid or not applicable"
            )
        return coupon

    async def _get_or_404(self, order_id: UUID) -> Order:
        order = await self._session.get(Order, order_id)
        if order is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Order not found")
        return order

    async def _fresh(self, order_id: UUID) -> OrderOut:
        stmt = (
            select(Order)
            .where(Order.id == order_id)
            .execution_options(populate_existing=True)
        )
        return OrderOut.model_validate((await self._session.execute(stmt)).scalar_one())


__all__ = ["OrdersService"]
