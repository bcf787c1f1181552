from unittest.mock import AsyncMock

import pytest

from routemgmt.models.credentials import GatewayCredentials
from routemgmt.models.gateway_api import GatewayApi
from routemgmt.models.tenant import Tenant
from routemgmt.pilot.gateway import GatewayClient

GW_URL = "https://gateway.example.com/v1"
ACTION_URL = "https://openwhisk.example.com/api/v1/web/guest/default"


@pytest.fixture
def params():
    return {
        "gwUrl": GW_URL,
        "gwUser": "admin",
        "gwPwd": "secret",
        "__ow_meta_namespace": "guest",
        "basepath": "/books",
    }


@pytest.fixture
def credentials():
    return GatewayCredentials.from_user(gw_url=GW_URL, gw_user="admin", gw_pwd="secret")


@pytest.fixture
def gw_api_payload():
    return {
        "id": "api-123",
        "tenantId": "tenant-1",
        "name": "Book Club",
        "basePath": "/books",
        "managedUrl": "https://gateway.example.com/guest/books",
        "resources": {
            "/a": {
                "operations": {
                    "GET": {
                        "backendMethod": "GET",
                        "backendUrl": f"{ACTION_URL}/getBooks.http",
                        "policies": [{"type": "reqMapping", "value": []}],
                    },
                    "POST": {
                        "backendMethod": "POST",
                        "backendUrl": f"{ACTION_URL}/postBooks.http",
                    },
                },
            },
            "/b": {
                "operations": {
                    "DELETE": {
                        "backendMethod": "DELETE",
                        "backendUrl": f"{ACTION_URL}/deleteBooks.http",
                    },
                },
            },
        },
    }


@pytest.fixture
def gw_api(gw_api_payload):
    return GatewayApi.model_validate(gw_api_payload)


@pytest.fixture
def tenant():
    return Tenant(id="tenant-1", namespace="guest", instance="openwhisk")


@pytest.fixture
def client(tenant, gw_api):
    fake = AsyncMock(spec=GatewayClient)
    fake.list_tenants.return_value = [tenant]
    fake.list_apis.return_value = [gw_api]
    fake.delete_api.return_value = None
    fake.replace_api.return_value = None
    return fake
