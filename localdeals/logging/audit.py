"""Structured audit logging for marketplace write actions.

Every offer, deal and order that enters the Geo Store leaves an
``audit_event`` entry, as do rejected requests from the rate limiter.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from localdeals.logging import get_logger

logger = get_logger(__name__)


class AuditEventType(str, Enum):
    """Types of auditable events."""

    # Listings
    OFFER_POSTED = "offer_posted"
    DEAL_POSTED = "deal_posted"

    # Orders
    ORDER_PLACED = "order_placed"
    ORDER_STATUS_CHANGED = "order_status_changed"

    # Security
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"


class AuditLogger:
    """Centralized audit logging service."""

    @staticmethod
    def log_event(
        event_type: AuditEventType,
        actor: str,
        resource_type: str,
        resource_id: str,
        action: str,
        success: bool = True,
        metadata: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Log an auditable event with structured context.

        Args:
            event_type: Type of audit event
            actor: Client address or customer email performing the action
            resource_type: Type of resource (offer, deal, order)
            resource_id: ID of the affected resource
            action: Human-readable action description
            success: Whether the action succeeded
            metadata: Additional context (coordinates, prices, statuses)
        """
        logger.info(
            "audit_event",
            event_type=event_type.value,
            actor=actor,
            resource_type=resource_type,
            resource_id=resource_id,
            action=action,
            success=success,
            timestamp=datetime.now(timezone.utc).isoformat(),
            metadata=metadata or {},
        )

    @staticmethod
    def log_listing_posted(
        actor: str,
        resource_type: str,
        resource_id: str,
        title: str,
        latitude: float,
        longitude: float,
    ) -> None:
        """Log a newly posted offer or deal."""
        event_type = (
            AuditEventType.DEAL_POSTED
            if resource_type == "deal"
            else AuditEventType.OFFER_POSTED
        )
        AuditLogger.log_event(
            event_type=event_type,
            actor=actor,
            resource_type=resource_type,
            resource_id=resource_id,
            action=f"Posted {resource_type}: {title}",
            metadata={"latitude": latitude, "longitude": longitude},
        )

    @staticmethod
    def log_order_placed(
        actor: str,
        order_id: str,
        deal_id: str,
        quantity: int,
        discount_price: float,
    ) -> None:
        """Log a new order."""
        AuditLogger.log_event(
            event_type=AuditEventType.ORDER_PLACED,
            actor=actor,
            resource_type="order",
            resource_id=order_id,
            action="Order placed",
            metadata={
                "deal_id": deal_id,
                "quantity": quantity,
                "discount_price": discount_price,
            },
        )

    @staticmethod
    def log_order_status_changed(actor: str, order_id: str, status: str) -> None:
        """Log an order status transition."""
        AuditLogger.log_event(
            event_type=AuditEventType.ORDER_STATUS_CHANGED,
            actor=actor,
            resource_type="order",
            resource_id=order_id,
            action=f"Order status set to {status}",
            metadata={"status": status},
        )

    @staticmethod
    def log_rate_limit_exceeded(
        actor: str,
        action: str,
        limit: int,
        window_seconds: int,
    ) -> None:
        """Log rate limit violations."""
        AuditLogger.log_event(
            event_type=AuditEventType.RATE_LIMIT_EXCEEDED,
            actor=actor,
            resource_type="system",
            resource_id="rate_limiter",
            action=f"Rate limit exceeded: {action}",
            success=False,
            metadata={
                "action": action,
                "limit": limit,
                "window_seconds": window_seconds,
            },
        )
