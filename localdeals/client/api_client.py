"""HTTP client for the marketplace API."""

from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from localdeals.errors import (
    InvalidArgument,
    LocalDealsError,
    NetworkError,
    NotFound,
    RateLimited,
    StoreUnavailable,
)
from localdeals.logging import get_logger
from localdeals.models.deal import Deal, DealInput
from localdeals.models.geo import Coordinates
from localdeals.models.offer import Offer, OfferInput
from localdeals.models.order import Order, OrderInput, OrderStatus

logger = get_logger(__name__)


class LocalDealsClient:
    """
    Async client for the offers, deals and orders endpoints.

    Create one per application and share it; pass ``http_client`` to reuse an
    existing ``httpx.AsyncClient`` (its base URL must already point at the API).
    """

    def __init__(self, base_url: str = "", http_client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url
        self._http_client = http_client

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(base_url=self.base_url)
        return self._http_client

    async def close(self) -> None:
        if self._http_client is not None and not self._http_client.is_closed:
            await self._http_client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request and decode JSON; failures become taxonomy errors."""
        client = self._get_http_client()
        try:
            response = await client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            logger.error("api_request_failed", method=method, path=path, error=str(e))
            raise NetworkError(f"Could not reach server: {e}") from e

        if response.is_success:
            try:
                return response.json()
            except ValueError as e:
                # Captive portals and proxies answer 200 with HTML
                logger.error(
                    "api_response_not_json",
                    path=path,
                    content_type=response.headers.get("content-type"),
                )
                raise NetworkError("Unexpected response from server") from e

        raise self._error_for(response)

    def _decode(self, path: str, schema: Any, data: Any) -> Any:
        """Validate a decoded body against the expected shape."""
        try:
            return TypeAdapter(schema).validate_python(data)
        except ValidationError as e:
            logger.error("api_response_invalid", path=path, errors=e.error_count())
            raise StoreUnavailable("Unexpected response from server") from e

    def _error_for(self, response: httpx.Response) -> LocalDealsError:
        try:
            message = response.json().get("message") or response.reason_phrase
        except (ValueError, AttributeError):
            message = response.text or response.reason_phrase

        logger.warning(
            "api_error_response",
            path=response.request.url.path,
            status_code=response.status_code,
            error=message,
        )

        if response.status_code == 400:
            return InvalidArgument(message)
        if response.status_code == 404:
            return NotFound(message)
        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            return RateLimited(message, retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None)
        return StoreUnavailable(message)

    # ----------------- OFFERS -----------------

    async def get_nearby_offers(self, location: Coordinates, radius_km: float = 5.0) -> list[Offer]:
        params = {"lat": location.latitude, "lng": location.longitude, "radius": radius_km}
        data = await self._request("GET", "/offers/nearby", params=params)
        return self._decode("/offers/nearby", list[Offer], data)

    async def create_offer(self, offer: OfferInput) -> Offer:
        data = await self._request("POST", "/offers", json=offer.model_dump(mode="json"))
        return self._decode("/offers", Offer, data)

    # ----------------- DEALS -----------------

    async def get_deals(self) -> list[Deal]:
        data = await self._request("GET", "/deals")
        return self._decode("/deals", list[Deal], data)

    async def get_nearby_deals(self, location: Coordinates, radius_km: float = 5.0) -> list[Deal]:
        params = {"lat": location.latitude, "lng": location.longitude, "radius": radius_km}
        data = await self._request("GET", "/deals/nearby", params=params)
        return self._decode("/deals/nearby", list[Deal], data)

    async def create_deal(self, deal: DealInput) -> Deal:
        data = await self._request("POST", "/deals", json=deal.model_dump(mode="json"))
        return self._decode("/deals", Deal, data)

    # ----------------- ORDERS -----------------

    async def create_order(self, order: OrderInput) -> Order:
        data = await self._request("POST", "/orders", json=order.model_dump(by_alias=True, mode="json"))
        return self._decode("/orders", Order, data)

    async def get_all_orders(self) -> list[Order]:
        data = await self._request("GET", "/orders")
        return self._decode("/orders", list[Order], data)

    async def get_orders_by_customer(self, customer_email: str) -> list[Order]:
        data = await self._request("GET", f"/orders/customer/{customer_email}")
        return self._decode("/orders/customer", list[Order], data)

    async def get_order(self, order_id: str) -> Order:
        data = await self._request("GET", f"/orders/{order_id}")
        return self._decode("/orders/{id}", Order, data)

    async def update_order_status(self, order_id: str, status: OrderStatus) -> Order:
        data = await self._request("PUT", f"/orders/{order_id}/status", json={"status": status.value})
        return self._decode("/orders/{id}/status", Order, data)
