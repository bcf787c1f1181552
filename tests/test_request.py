import base64

import pytest

from routemgmt.exceptions import ErrorKind, InputError
from routemgmt.models.request import DeleteApiRequest


def test_valid_params(params):
    request = DeleteApiRequest.from_params(params)

    assert request.namespace == "guest"
    assert request.basepath == "/books"
    assert request.tenant_instance == "openwhisk"
    assert request.deletes_entire_api
    assert request.credentials.gw_auth == base64.b64encode(b"admin:secret").decode()


@pytest.mark.parametrize(
    "missing, message",
    [
        ("gwUrl", "gwUrl is required."),
        ("__ow_meta_namespace", "__ow_meta_namespace is required."),
        ("basepath", "basepath is required."),
    ],
)
def test_missing_required(params, missing, message):
    params.pop(missing)

    with pytest.raises(InputError) as exc_info:
        DeleteApiRequest.from_params(params)

    assert exc_info.value.message == message
    assert exc_info.value.kind == ErrorKind.INPUT


@pytest.mark.parametrize("params", [None, ["gwUrl"], "gwUrl"])
def test_no_message(params):
    assert DeleteApiRequest.validate(params) == "Internal error. A message parameter was not supplied."


def test_empty_message_needs_gw_url():
    with pytest.raises(InputError) as exc_info:
        DeleteApiRequest.from_params({})

    assert exc_info.value.message == "gwUrl is required."


def test_plain_namespace_accepted(params):
    params.pop("__ow_meta_namespace")
    params["namespace"] = "other"

    request = DeleteApiRequest.from_params(params)

    assert request.namespace == "other"


def test_namespace_override_wins(params):
    params["namespace"] = "other"

    request = DeleteApiRequest.from_params(params)

    assert request.namespace == "guest"


def test_operation_requires_relpath(params):
    params["operation"] = "GET"

    with pytest.raises(InputError) as exc_info:
        DeleteApiRequest.from_params(params)

    assert str(exc_info.value) == "When specifying an operation, the relpath is required."


def test_relpath_without_operation(params):
    params["relpath"] = "/a"

    request = DeleteApiRequest.from_params(params)

    assert not request.deletes_entire_api
    assert request.selector.path == "/a"
    assert request.selector.operation is None


def test_operation_lower_cased(params):
    params.update(relpath="/a", operation="GET", tenantInstance="custom")

    request = DeleteApiRequest.from_params(params)

    assert request.operation == "get"
    assert request.selector.operation == "get"
    assert request.tenant_instance == "custom"


def test_describe_masks_credentials(params):
    request = DeleteApiRequest.from_params(params)

    described = request.describe(params=params)

    assert described["GW User"] == "XXXXXXXXXX"
    assert described["GW Pwd"] == "XXXXXXXXXX"
    assert "secret" not in str(described)
    assert described["tenantInstance"] == "None / openwhisk"
