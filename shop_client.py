"""HTTP client for the shop services.

This module wraps the REST endpoints of the cart, order and product
services behind one class, :class:`ShopClient`.  Each service runs as a
separate process, so the client keeps a base URL per service.  The
``requests`` library is used for all HTTP calls.

All high level methods return a tuple ``(data, error)``.  On success
``error`` is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.  The client
never raises for HTTP or transport errors, which keeps calling code
(scripts, bots, other services) free of try/except noise.

* :meth:`ShopClient.list_cart` / :meth:`ShopClient.add_to_cart` /
  :meth:`ShopClient.remove_from_cart`
* :meth:`ShopClient.create_order` / :meth:`ShopClient.list_orders` /
  :meth:`ShopClient.get_order`
* :meth:`ShopClient.list_products`
* :meth:`ShopClient.health`
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from shop_services.app.core.config import settings


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ShopClient:
    """Client for the cart, order and product services."""

    def __init__(
        self,
        *,
        cart_url: Optional[str] = None,
        order_url: Optional[str] = None,
        product_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            cart_url: Base URL of the cart service.  Defaults to
                ``CART_SERVICE_URL`` from the settings.
            order_url: Base URL of the order service.  Defaults to
                ``ORDER_SERVICE_URL``.
            product_url: Base URL of the product service.  Defaults to
                ``PRODUCT_SERVICE_URL``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_urls: Dict[str, str] = {
            "cart": (cart_url or settings.cart_service_url).rstrip("/"),
            "order": (order_url or settings.order_service_url).rstrip("/"),
            "product": (product_url or settings.product_service_url).rstrip("/"),
        }
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, service: str, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against one of the services.

        Args:
            service: ``"cart"``, ``"order"`` or ``"product"``.
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to the service base URL.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or the raw text for non-JSON responses.
        """
        url = f"{self.base_urls[service]}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return None, None
            if "application/json" in response.headers.get("content-type", ""):
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("%s request to %s failed (%s): %s", method, url, status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("%s request to %s failed: %s", method, url, exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Cart operations
    # ------------------------------------------------------------------
    def list_cart(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("cart", "GET", "/cart")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def add_to_cart(self, item: Dict[str, Any]) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Add ``item`` to the cart.

        Args:
            item: The item to store.  Must contain an ``id``.
        Returns:
            A tuple ``(cart, error)`` where ``cart`` is the updated cart.
        """
        data, error = self._request("cart", "POST", "/cart", json_body=item)
        if error:
            return [], error
        return (data or {}).get("cart", []), None

    def remove_from_cart(self, item_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("cart", "DELETE", f"/cart/{item_id}")
        if error:
            return [], error
        return (data or {}).get("cart", []), None

    # ------------------------------------------------------------------
    # Order operations
    # ------------------------------------------------------------------
    def create_order(
        self, items: Optional[List[Any]] = None, total: Optional[float] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an order.

        Fields left as ``None`` are omitted so that the service applies
        its defaults (no items, zero total).

        Returns:
            A tuple ``(order, error)``.
        """
        payload: Dict[str, Any] = {}
        if items is not None:
            payload["items"] = items
        if total is not None:
            payload["total"] = total
        data, error = self._request("order", "POST", "/orders", json_body=payload)
        if error:
            return None, error
        return (data or {}).get("order"), None

    def list_orders(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("order", "GET", "/orders")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_order(self, order_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single order by ID.

        A missing order is reported as an error with ``status_code`` 404.
        """
        return self._request("order", "GET", f"/orders/{order_id}")

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def list_products(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("product", "GET", "/products")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def health(self, service: str = "product") -> Tuple[bool, Optional[Error]]:
        """Check whether ``service`` answers its health endpoint with ``OK``."""
        if service not in self.base_urls:
            raise ValueError(f"Unknown service: {service!r}")
        data, error = self._request(service, "GET", "/health")
        if error:
            return False, error
        return data == "OK", None
