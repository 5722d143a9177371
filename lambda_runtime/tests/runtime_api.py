"""
Shared Runtime API values for the test suite.
"""

BASE_URL = "http://127.0.0.1:7000"
NEXT_URL = f"{BASE_URL}/2018-06-01/runtime/invocation/next"
INIT_ERROR_URL = f"{BASE_URL}/2018-06-01/runtime/init/error"
REQUEST_ID = "8476a536-e9f4-11e8-9739-2dfe598c3fcd"
TRACE_ID = "Root=1-5bef4de7-ad49b0e87f6ef6c87fc2e700;Parent=9a9197af755a6419;Sampled=1"
FUNCTION_ARN = "arn:aws:lambda:us-east-1:123456789012:function:echo"


def response_url(request_id: str = REQUEST_ID) -> str:
    return f"{BASE_URL}/2018-06-01/runtime/invocation/{request_id}/response"


def error_url(request_id: str = REQUEST_ID) -> str:
    return f"{BASE_URL}/2018-06-01/runtime/invocation/{request_id}/error"
