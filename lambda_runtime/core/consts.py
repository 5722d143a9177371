"""
Runtime API constants.

Paths, header names and error type markers defined by the Lambda Runtime API.
"""

API_VERSION = "2018-06-01"

# ===== URL paths =====
INVOCATION_URL_PREFIX = f"/{API_VERSION}/runtime/invocation"
REQUEST_WORK_URL_SUFFIX = "/next"
POST_RESPONSE_URL_SUFFIX = "/response"
POST_ERROR_URL_SUFFIX = "/error"
POST_INIT_ERROR_URL = f"/{API_VERSION}/runtime/init/error"

# ===== Response headers (fetch work) =====
HEADER_REQUEST_ID = "Lambda-Runtime-Aws-Request-Id"
HEADER_DEADLINE = "Lambda-Runtime-Deadline-Ms"
HEADER_INVOKED_FUNCTION_ARN = "Lambda-Runtime-Invoked-Function-Arn"
HEADER_TRACE_ID = "Lambda-Runtime-Trace-Id"
HEADER_CLIENT_CONTEXT = "Lambda-Runtime-Client-Context"
HEADER_COGNITO_IDENTITY = "Lambda-Runtime-Cognito-Identity"

# ===== Error payload markers =====
FUNCTION_ERROR = "FunctionError"
INITIALIZATION_ERROR = "InitializationError"

# ===== Upstream error reasons =====
UPSTREAM_TIMEOUT = "timeout"
UPSTREAM_CONNECTION_RESET = "connectionResetByPeer"

# Environment variable read by the X-Ray SDK
TRACE_ID_ENV = "_X_AMZN_TRACE_ID"
