"""
Reflex-compatible row model for transaction tables.

Extends rx.Base so rows can be used with rx.foreach and other Reflex
reactive components.
"""

from typing import Any, Mapping

import reflex as rx

from payments_ui.models.transaction import row_key, student_name


class TransactionModel(rx.Base):
    """One transaction as rendered by the tables and the status card."""

    id: str = ""
    collect_id: str = ""
    custom_order_id: str = ""
    school_id: str = ""
    student_name: str = ""
    student_id: str = ""
    student_email: str = ""
    gateway: str = ""
    order_amount: float = 0.0
    transaction_amount: float = 0.0
    status: str = ""
    payment_mode: str = ""
    payment_time: str = ""
    bank_reference: str = ""
    payment_message: str = ""
    error_message: str = ""


def dict_to_transaction_model(data: Mapping[str, Any], index: int = 0) -> TransactionModel:
    """
    Convert a backend transaction payload to a TransactionModel.

    Args:
        data: Transaction payload.
        index: Position on the page, used for the row key fallback.
    """
    info = data.get("student_info") if isinstance(data.get("student_info"), Mapping) else {}
    return TransactionModel(
        id=row_key(data, index),
        collect_id=str(data.get("collect_id") or ""),
        custom_order_id=str(data.get("custom_order_id") or ""),
        school_id=str(data.get("school_id") or ""),
        student_name=student_name(data),
        student_id=str(info.get("id") or ""),
        student_email=str(info.get("email") or data.get("student_email") or ""),
        gateway=str(data.get("gateway") or ""),
        order_amount=float(data.get("order_amount") or 0),
        transaction_amount=float(data.get("transaction_amount") or 0),
        status=str(data.get("status") or ""),
        payment_mode=str(data.get("payment_mode") or ""),
        payment_time=str(data.get("payment_time") or ""),
        bank_reference=str(data.get("bank_reference") or ""),
        payment_message=str(data.get("payment_message") or ""),
        error_message=str(data.get("error_message") or ""),
    )
