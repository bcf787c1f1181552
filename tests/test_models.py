import base64

from routemgmt.models.credentials import GatewayCredentials
from routemgmt.models.endpoint import EndpointDocument, EndpointSelector, parse_action_url


def test_credentials_token():
    credentials = GatewayCredentials.from_user(gw_url="http://gw.com/", gw_user="user", gw_pwd="pwd")

    assert credentials.gw_url == "http://gw.com"
    assert credentials.gw_auth == base64.b64encode(b"user:pwd").decode()
    assert credentials.headers["Authorization"] == f"Basic {credentials.gw_auth}"
    assert credentials.url(resource="tenants") == "http://gw.com/tenants"


def test_credentials_without_password():
    credentials = GatewayCredentials.from_user(gw_url="http://gw.com", gw_user="user")

    assert credentials.gw_auth is None
    assert "Authorization" not in credentials.headers


def test_credentials_repr_hides_token(credentials):
    assert credentials.gw_auth not in repr(credentials)


def test_parse_action_url():
    url = "https://host/api/v1/web/guest/default/hello.http"

    assert parse_action_url(url) == ("guest", "hello")
    assert parse_action_url("https://host/api/v1/web/guest") == ("guest", None)
    assert parse_action_url("https://host/other") == (None, None)
    assert parse_action_url(None) == (None, None)


def test_document_from_gateway_api(gw_api):
    document = EndpointDocument.from_gateway_api(api=gw_api)

    assert document.swagger == "2.0"
    assert document.info.title == "Book Club"
    assert document.base_path == "/books"
    assert set(document.paths) == {"/a", "/b"}
    assert set(document.paths["/a"]) == {"get", "post"}

    extension = document.paths["/a"]["get"].extension
    assert extension.backend_method == "GET"
    assert extension.action_name == "getBooks"
    assert extension.action_namespace == "guest"
    assert extension.policies == [{"type": "reqMapping", "value": []}]


def test_document_serialized_as_swagger(gw_api):
    data = EndpointDocument.from_gateway_api(api=gw_api).serialize()

    assert data["basePath"] == "/books"
    operation = data["paths"]["/b"]["delete"]
    assert operation["x-openwhisk"]["backendUrl"].endswith("/deleteBooks.http")
    assert operation["responses"] == {"default": {"description": "Default response"}}


def test_document_back_to_gateway_api(gw_api, gw_api_payload):
    document = EndpointDocument.from_gateway_api(api=gw_api)

    published = document.to_gateway_api(tenant_id="tenant-1", api_id="api-123").serialize()

    assert published["tenantId"] == "tenant-1"
    assert published["basePath"] == "/books"
    assert published["name"] == "Book Club"
    assert published["resources"] == gw_api_payload["resources"]


def test_selector_lower_cases_operation():
    assert EndpointSelector(path="/a", operation="GET") == EndpointSelector(path="/a", operation="get")
    assert EndpointSelector(path="/a").operation is None
