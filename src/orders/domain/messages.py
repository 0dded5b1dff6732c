"""
Client-facing order messages (kept byte-for-byte stable).
"""

ORDERS_FETCH_FAILED = "Error WHile Geting Orders"
ORDER_STATUS_UPDATE_FAILED = "Error While Updateing Order"
