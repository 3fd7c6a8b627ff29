"""
Abstract base class defining the transaction data access contract.

Controllers depend only on this interface, so a screen behaves the same
whether it talks to the real backend or to in-memory demo data.

Implementations:
- HttpTransactionService: the payments backend, via the authenticated client
- DemoTransactionService: static in-memory data for development/testing
"""

from abc import ABC, abstractmethod
from typing import Any

from payments_ui.models.transaction import Transaction, TransactionPage


class TransactionService(ABC):
    """
    Abstract base class for transaction queries.

    Every method raises an ApiError subclass on failure.
    """

    @abstractmethod
    async def list_transactions(self, params: dict[str, Any]) -> TransactionPage:
        """
        Return one page of transactions across all schools.

        Args:
            params: Query parameters: ``page`` (1-indexed) and ``limit``,
                plus any of ``status``, ``date_from``, ``date_to``,
                ``school_id``, ``gateway``, ``search``, ``sort``, ``order``.
        """

    @abstractmethod
    async def list_school_transactions(
        self, school_id: str, params: dict[str, Any]
    ) -> TransactionPage:
        """
        Return one page of transactions for a single school.

        Args:
            school_id: School identifier, sent in the path.
            params: Pagination parameters (``page``, ``limit``).
        """

    @abstractmethod
    async def get_transaction_status(self, custom_order_id: str) -> Transaction | None:
        """
        Look up a single transaction by its human-facing order id.

        Returns:
            The transaction, or None when the response carried none.
        """
