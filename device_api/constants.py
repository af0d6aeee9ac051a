# ==========================================
# 1. Environment Variables
# ==========================================
ENV_AWS_REGION = "AWS_REGION"
ENV_TABLE_NAME = "DEVICES_TABLE_NAME"
ENV_LOG_LEVEL = "DEVICE_API_LOG_LEVEL"
ENV_DYNAMODB_ENDPOINT_URL = "DYNAMODB_ENDPOINT_URL"

DEFAULT_LOG_LEVEL = "INFO"

# ==========================================
# 2. Device Fields
# ==========================================
# Checked in this order; the first empty field is reported.
# (attribute name, label used in the error message)
REQUIRED_DEVICE_FIELDS = [
    ("ID", "ID"),
    ("DeviceModel", "Device Model"),
    ("Name", "Name"),
    ("Note", "Note"),
    ("Serial", "Serial"),
]

DEVICE_PRIMARY_KEY = "ID"

# ==========================================
# 3. Response Messages
# ==========================================
MSG_NO_INPUTS = "No inputs provided, please provide inputs in JSON format."
MSG_WRONG_FORMAT = "Wrong format: Inputs must be a valid JSON."
MSG_MISSING_FIELD = "Missing field: {field}"
MSG_DATABASE_ERROR = "Internal Server Error\nDatabase error."

# ==========================================
# 4. HTTP
# ==========================================
HTTP_CREATED = 201
HTTP_BAD_REQUEST = 400
HTTP_INTERNAL_SERVER_ERROR = 500

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_TEXT = "text/plain; charset=utf-8"
