"""Constants for error messages.

Client compatibility depends on these strings matching byte for byte, so
tests import them instead of repeating literals.
"""

# Transport / decoding
TRANSPORT_NOT_SUPPORTED_MESSAGE = "transport not supported"
JSON_BODY_DECODE_ERROR_PREFIX = "json body could not be decoded: "

# Operation selection
UNKNOWN_OPERATION_NAMED_ERROR = "Unknown operation named '{name}'."
OPERATION_NAME_REQUIRED_ERROR = (
    "Must provide operation name if query contains multiple operations."
)

# Variable coercion
VARIABLE_PATH_ROOT = "variable"
VARIABLE_WRONG_TYPE_ERROR = "cannot use {kind} as {type_name}"
VARIABLE_MUST_BE_DEFINED_ERROR = "must be defined"
VARIABLE_CANNOT_BE_NULL_ERROR = "cannot be null"
VARIABLE_UNKNOWN_FIELD_ERROR = "unknown field"
VARIABLE_INVALID_ENUM_ERROR = "{value} is not a valid {type_name}"

# Execution
SUBSCRIPTIONS_NOT_SUPPORTED_ERROR = "subscriptions are not supported by this transport"
INTERNAL_SYSTEM_ERROR = "internal system error"

# Start-up
SCHEMA_FILE_NOT_FOUND_ERROR = "Schema file not found: {path}"
SCHEMA_INVALID_ERROR = "Invalid GraphQL schema: {error}"
CONFIG_LOADING_ERROR = "Error loading configuration: {error}"
