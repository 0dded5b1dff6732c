# src/shared/error_codes.py
# Central mapping for the HTTP error contract {code, message, details?}.
# Keep keys stable: storefront clients branch on them.
ERROR_CODES = {
    # ─── Validation & Requests ──────────────────────────────────────────────
    "validation_error": {
        "http": 422,
        "message": "Validation failed for one or more fields."
    },
    "invalid_request": {
        "http": 400,
        "message": "Invalid request payload."
    },

    # ─── Authentication & Authorization ────────────────────────────────────
    "unauthorized": {
        "http": 401,
        "message": "Unauthorized. Please provide valid credentials."
    },
    "token_missing": {
        "http": 401,
        "message": "Token is missing."
    },
    "expired_token": {
        "http": 401,
        "message": "Token has expired."
    },
    "invalid_token": {
        "http": 401,
        "message": "Invalid token."
    },
    "forbidden": {
        "http": 403,
        "message": "You are not allowed to perform this action."
    },

    # ─── Resources ─────────────────────────────────────────────────────────
    "not_found": {
        "http": 404,
        "message": "Resource not found."
    },
    "user_not_found": {
        "http": 404,
        "message": "User not found."
    },
    "conflict": {
        "http": 409,
        "message": "Conflict with existing resource."
    },

    # ─── Internal ──────────────────────────────────────────────────────────
    "internal_error": {
        "http": 500,
        "message": "An unexpected error occurred. Please try again later."
    },
}
