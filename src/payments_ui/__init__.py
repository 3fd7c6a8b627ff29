"""
Payments UI: a Reflex dashboard for searching school payment transactions.

Staff log in, browse recent payments, search by status, date, school or
gateway, and look up a single order. Transactions live in a separate
payments backend; this package only orchestrates requests to it.

Subpackages:
- controllers: Per-screen query state (filters, pagination, request epochs)
- services: Transaction and auth data access (backend and demo implementations)
- models: Session, transaction and view models
- components: Reflex UI components
- lib: Logging, storage and shared client factories
- data: Demo fixtures

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
