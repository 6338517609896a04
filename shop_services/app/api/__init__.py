"""
API package containing the HTTP routes of all services.

``router.py`` exposes one router per service (``cart_router``,
``order_router``, ``product_router``); the endpoint modules live in
``endpoints/``.
"""
