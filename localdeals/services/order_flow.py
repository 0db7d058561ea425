"""Order placement and status management."""

from localdeals.errors import NotFound
from localdeals.logging import get_logger
from localdeals.logging.audit import AuditLogger
from localdeals.models.order import Order, OrderInput, OrderStatus
from localdeals.storage.mongo_order_repo import MongoOrderRepository

logger = get_logger(__name__)


class OrderFlowService:
    """Service for placing orders and moving them through their lifecycle."""

    def __init__(self, order_repo: MongoOrderRepository):
        self.order_repo = order_repo

    async def place_order(self, order_input: OrderInput, actor: str) -> Order:
        """Create a pending order."""
        order = await self.order_repo.create(order_input)

        AuditLogger.log_order_placed(
            actor=actor,
            order_id=order.id,
            deal_id=order.deal_id,
            quantity=order.quantity,
            discount_price=order.discount_price,
        )

        return order

    async def get_order(self, order_id: str) -> Order:
        """Fetch one order or raise NotFound."""
        order = await self.order_repo.get_by_id(order_id)
        if order is None:
            raise NotFound("Order not found")
        return order

    async def list_orders(self) -> list[Order]:
        return await self.order_repo.list_all()

    async def list_customer_orders(self, customer_email: str) -> list[Order]:
        return await self.order_repo.list_by_customer(customer_email)

    async def update_status(self, order_id: str, status: OrderStatus, actor: str) -> Order:
        """Move an order to ``status`` or raise NotFound."""
        order = await self.order_repo.update_status(order_id, status)
        if order is None:
            logger.warning("order_status_update_missing", order_id=order_id)
            raise NotFound("Order not found")

        AuditLogger.log_order_status_changed(actor=actor, order_id=order.id, status=status.value)

        return order
