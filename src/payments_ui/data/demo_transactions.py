"""
Demo transaction fixtures.

Records follow the backend's payload shape, including the nested
``student_info`` block some endpoints return.
"""

_SCHOOL_A = "65b0e6293e9f76a9694d84b4"
_SCHOOL_B = "65b0e6293e9f76a9694d84c7"

DEMO_TRANSACTIONS = [
    {
        "collect_id": "6721a6d3f0a1c2b3d4e5f601",
        "custom_order_id": "ORD-20240901-0001",
        "school_id": _SCHOOL_A,
        "gateway": "razorpay",
        "order_amount": 2000,
        "transaction_amount": 2040,
        "status": "success",
        "payment_mode": "upi",
        "payment_time": "2024-09-01T09:15:00Z",
        "bank_reference": "HDFC0001",
        "student_info": {"name": "Aarav Sharma", "id": "STU-101", "email": "aarav@example.com"},
    },
    {
        "collect_id": "6721a6d3f0a1c2b3d4e5f602",
        "custom_order_id": "ORD-20240902-0002",
        "school_id": _SCHOOL_A,
        "gateway": "payu",
        "order_amount": 1500,
        "transaction_amount": 1500,
        "status": "pending",
        "payment_mode": "netbanking",
        "payment_time": "2024-09-02T11:40:00Z",
        "student_info": {"name": "Diya Patel", "id": "STU-102", "email": "diya@example.com"},
    },
    {
        "collect_id": "6721a6d3f0a1c2b3d4e5f603",
        "custom_order_id": "ORD-20240903-0003",
        "school_id": _SCHOOL_B,
        "gateway": "cashfree",
        "order_amount": 3200,
        "transaction_amount": 3200,
        "status": "failed",
        "payment_mode": "card",
        "payment_time": "2024-09-03T14:05:00Z",
        "error_message": "Card declined",
        "student_name": "Kabir Singh",
    },
    {
        "collect_id": "6721a6d3f0a1c2b3d4e5f604",
        "custom_order_id": "ORD-20240905-0004",
        "school_id": _SCHOOL_B,
        "gateway": "razorpay",
        "order_amount": 1800,
        "transaction_amount": 1836,
        "status": "success",
        "payment_mode": "upi",
        "payment_time": "2024-09-05T08:30:00Z",
        "bank_reference": "ICIC0042",
        "student_info": {"name": "Meera Iyer", "id": "STU-204", "email": "meera@example.com"},
    },
    {
        "custom_order_id": "ORD-20240907-0005",
        "school_id": _SCHOOL_A,
        "gateway": "payu",
        "order_amount": 2500,
        "transaction_amount": 2500,
        "status": "success",
        "payment_mode": "card",
        "payment_time": "2024-09-07T16:20:00Z",
        "student_name": "Rohan Gupta",
    },
    {
        "collect_id": "6721a6d3f0a1c2b3d4e5f606",
        "custom_order_id": "ORD-20240910-0006",
        "school_id": _SCHOOL_A,
        "gateway": "cashfree",
        "order_amount": 900,
        "transaction_amount": 900,
        "status": "pending",
        "payment_mode": "wallet",
        "payment_time": "2024-09-10T10:00:00Z",
        "student_info": {"name": "Isha Verma", "id": "STU-106", "email": "isha@example.com"},
    },
    {
        "collect_id": "6721a6d3f0a1c2b3d4e5f607",
        "custom_order_id": "ORD-20240912-0007",
        "school_id": _SCHOOL_B,
        "gateway": "razorpay",
        "order_amount": 4100,
        "transaction_amount": 4182,
        "status": "success",
        "payment_mode": "netbanking",
        "payment_time": "2024-09-12T12:45:00Z",
        "student_info": {"name": "Vivaan Rao", "id": "STU-207", "email": "vivaan@example.com"},
    },
    {
        "collect_id": "6721a6d3f0a1c2b3d4e5f608",
        "custom_order_id": "ORD-20240915-0008",
        "school_id": _SCHOOL_A,
        "gateway": "payu",
        "order_amount": 1200,
        "transaction_amount": 1200,
        "status": "failed",
        "payment_mode": "upi",
        "payment_time": "2024-09-15T18:10:00Z",
        "error_message": "UPI request expired",
        "student_info": {"name": "Anaya Nair", "id": "STU-108", "email": "anaya@example.com"},
    },
]
