"""
Static and demo data for the payments dashboard.

This package contains fixture data used by DemoTransactionService for
development, testing, and demonstrations without a running backend.

Modules:
- demo_transactions: Pre-populated transaction payloads with realistic values
"""
