"""
Application package for the cart, order and product services.

The three services share one code base but run as separate
applications.  Each domain keeps its schemas in ``schemas/``, its logic
in ``services/`` and its routes in ``api/endpoints``; the application
factories in ``main`` put them together.
"""
