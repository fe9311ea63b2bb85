"""Fixed summaries and codes used in error payloads."""

STATUS_BAD_REQUEST_MESSAGE_DEFAULT = "Bad Request"
STATUS_NOT_ACCEPTABLE_MESSAGE_DEFAULT = "Not Acceptable"
STATUS_NOT_FOUND_MESSAGE_DEFAULT = "Not Found"
STATUS_INTERNAL_SERVER_ERROR_MESSAGE_DEFAULT = "Internal server error"

# codes emitted by the service itself (collaborators supply their own)
VALIDATION_ERROR_CODE = "VALIDATION_ERROR"
INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
AUTH_MANAGER_UNAVAILABLE_CODE = "AUTH_MANAGER_UNAVAILABLE"
