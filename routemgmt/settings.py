import os
from typing import Dict

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 8000))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# API Gateway
# Instance identifier used when the tenant was created for a namespace
DEFAULT_TENANT_INSTANCE = os.environ.get("ROUTEMGMT_TENANT_INSTANCE", "openwhisk")

# Package-bound values, callers should normally avoid setting these explicitly
GATEWAY_URL = os.environ.get("GATEWAY_URL")
GATEWAY_USER = os.environ.get("GATEWAY_USER")
GATEWAY_PASSWORD = os.environ.get("GATEWAY_PASSWORD")

GATEWAY_TIMEOUT = float(os.environ.get("GATEWAY_TIMEOUT", 30))
# Gateways are commonly deployed with self-signed certificates
GATEWAY_VERIFY_TLS = os.environ.get("GATEWAY_VERIFY_TLS", "false").lower() in ("1", "true", "yes")


def bound_params() -> Dict[str, str]:
    bound = {
        "gwUrl": GATEWAY_URL,
        "gwUser": GATEWAY_USER,
        "gwPwd": GATEWAY_PASSWORD,
    }
    return {key: value for key, value in bound.items() if value}
