"""Constants and configuration for the Ecwid orders API."""

# API endpoints
DEFAULT_API_URL = "https://app.ecwid.com/api/v3"
DEFAULT_LEGACY_API_URL = "https://app.ecwid.com/api/v1"

# API Paths
API_PATHS = {
    "orders": "/orders",
    "legacy_orders": "/orders",
}

# Default request timeout (seconds)
DEFAULT_TIMEOUT = 30

# Default rate limits (requests per second, burst capacity)
DEFAULT_RATE_LIMITS = {
    "/orders": (10, 20),
}

# Order statuses accepted by the legacy (v1) API
LEGACY_FULFILLMENT_STATUSES = frozenset(
    [
        "AWAITING_PROCESSING",
        "NEW",
        "PROCESSING",
        "SHIPPED",
        "DELIVERED",
        "WILL_NOT_DELIVER",
        "RETURNED",
    ]
)

# Order statuses accepted by the current (v3) API
FULFILLMENT_STATUSES = frozenset(
    [
        "AWAITING_PROCESSING",
        "PROCESSING",
        "SHIPPED",
        "DELIVERED",
        "WILL_NOT_DELIVER",
        "RETURNED",
    ]
)

# "CHARGEABLE, REFUNDED" is a single member upstream, kept as is
LEGACY_PAYMENT_STATUSES = frozenset(
    [
        "PAID",
        "ACCEPTED",
        "DECLINED",
        "CANCELLED",
        "AWAITING_PAYMENT",
        "QUEUED",
        "CHARGEABLE, REFUNDED",
        "INCOMPLETE",
    ]
)

PAYMENT_STATUSES = frozenset(
    [
        "PAID",
        "CANCELLED",
        "AWAITING_PAYMENT",
        "REFUNDED",
        "INCOMPLETE",
    ]
)

# Query parameter names
PARAM_KEYS = {
    "fulfillment_status": "fulfillmentStatus",
    "payment_status": "paymentStatus",
    "created_from": "createdFrom",
    "created_to": "createdTo",
    "updated_from": "updatedFrom",
    "updated_to": "updatedTo",
    "total_from": "totalFrom",
    "total_to": "totalTo",
    "limit": "limit",
    "offset": "offset",
    "coupon_code": "couponCode",
    "order_number": "orderNumber",
    "vendor_order_number": "vendorOrderNumber",
    "customer": "customer",
    "keywords": "keywords",
    "payment_method": "paymentMethod",
    "shipping_method": "shippingMethod",
}

# Keys that do not narrow the set of matched orders
PAGING_KEYS = frozenset(["limit", "offset"])

# Legacy bulk update parameters
NEW_STATUS_PARAMS = {
    "fulfillment": "new_fulfillment_status",
    "payment": "new_payment_status",
}

# Date handling
CANONICAL_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_PREFIX_PATTERN = r"^\d{4}-\d{2}-\d{2}"
DATE_INPUT_FORMATS = [
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%d %H:%M",
]
MAX_TIMESTAMP = 2**63 - 1

# Validation error categories
INVALID_ARGUMENT_CATEGORIES = {
    "missing_value": "Value is null or empty",
    "invalid_date": "Date string is invalid",
    "invalid_number": "Value is not a number",
    "negative_number": "Value must not be negative",
    "invalid_status": "Statuses string is invalid",
    "multiple_statuses": "Status string is invalid. Support only one status",
    "invalid_whitelist": "Statuses collection is invalid",
    "empty_query": "Query is empty. Prevent change all orders",
}

# Transport error codes
ERROR_CODES = {
    "auth_failed": "Authentication failed",
    "rate_limit_exceeded": "Rate limit exceeded",
    "api_error": "Ecwid API returned an error",
}
