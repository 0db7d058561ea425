"""Order handlers.

Routes:
    POST /orders                   place an order (201)
    GET  /orders                   all orders, newest first
    GET  /orders/customer/{email}  one customer's orders, newest first
    GET  /orders/{order_id}        single order (404 when absent)
    PUT  /orders/{order_id}/status change status (404 when absent)
"""

from typing import Any

from fastapi import APIRouter, Depends, Request, status

from localdeals.handlers import client_address
from localdeals.handlers.dependencies import get_order_flow_service, write_rate_limit
from localdeals.models.order import OrderInput, OrderStatusUpdate
from localdeals.services.order_flow import OrderFlowService

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Place an order",
    dependencies=[Depends(write_rate_limit("place_order"))],
)
async def create_order(
    order_input: OrderInput,
    service: OrderFlowService = Depends(get_order_flow_service),
) -> dict[str, Any]:
    order = await service.place_order(order_input, actor=order_input.customer_email)
    return order.to_wire()


@router.get("", summary="All orders")
async def list_orders(
    service: OrderFlowService = Depends(get_order_flow_service),
) -> list[dict[str, Any]]:
    orders = await service.list_orders()
    return [order.to_wire() for order in orders]


@router.get("/customer/{email}", summary="Orders placed by one customer")
async def list_customer_orders(
    email: str,
    service: OrderFlowService = Depends(get_order_flow_service),
) -> list[dict[str, Any]]:
    orders = await service.list_customer_orders(email)
    return [order.to_wire() for order in orders]


@router.get("/{order_id}", summary="Single order")
async def get_order(
    order_id: str,
    service: OrderFlowService = Depends(get_order_flow_service),
) -> dict[str, Any]:
    order = await service.get_order(order_id)
    return order.to_wire()


@router.put("/{order_id}/status", summary="Change order status")
async def update_order_status(
    order_id: str,
    update: OrderStatusUpdate,
    request: Request,
    service: OrderFlowService = Depends(get_order_flow_service),
) -> dict[str, Any]:
    order = await service.update_status(order_id, update.status, actor=client_address(request))
    return order.to_wire()
