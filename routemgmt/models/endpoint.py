from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlparse

from pydantic import Field

from routemgmt.models.base import GatewayDocument, KeyValue
from routemgmt.models.gateway_api import GatewayApi, GatewayOperation, GatewayResource

OPERATION_EXTENSION = "x-openwhisk"


def parse_action_url(backend_url: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Extract (namespace, action name) from a web action URL.

    e.g. https://host/api/v1/web/guest/default/hello.http -> ("guest", "hello")
    """
    if not backend_url:
        return None, None

    segments = [segment for segment in urlparse(backend_url).path.split("/") if segment]
    try:
        web_idx = segments.index("web")
        namespace = segments[web_idx + 1]
        action = segments[-1]
    except (ValueError, IndexError):
        return None, None

    if len(segments) <= web_idx + 2:
        return namespace, None
    return namespace, action.rsplit(".", 1)[0]


class OperationExtension(GatewayDocument):
    backend_method: Optional[str] = Field(None, alias="backendMethod")
    backend_url: Optional[str] = Field(None, alias="backendUrl")
    policies: Any = None
    security: Any = None
    action_name: Optional[str] = Field(None, alias="actionName")
    action_namespace: Optional[str] = Field(None, alias="actionNamespace")


def _default_responses() -> KeyValue:
    return {"default": {"description": "Default response"}}


class EndpointOperation(GatewayDocument):
    extension: OperationExtension = Field(default_factory=OperationExtension, alias=OPERATION_EXTENSION)
    responses: KeyValue = Field(default_factory=_default_responses)


class ApiInfo(GatewayDocument):
    title: Optional[str] = None
    version: str = "1.0.0"


class EndpointDocument(GatewayDocument):
    """Swagger 2.0 view of a gateway API, the form endpoints are edited in."""

    swagger: str = "2.0"
    info: ApiInfo = Field(default_factory=ApiInfo)
    base_path: Optional[str] = Field(None, alias="basePath")
    # path -> lower-case HTTP verb -> operation
    paths: Dict[str, Dict[str, EndpointOperation]] = Field(default_factory=dict)

    @classmethod
    def from_gateway_api(cls, api: GatewayApi) -> 'EndpointDocument':
        paths = {}
        for path, resource in api.resources.items():
            paths[path] = {
                verb.lower(): cls._build_operation(operation=operation)
                for verb, operation in resource.operations.items()
            }

        return cls(
            info=ApiInfo(title=api.name),
            base_path=api.base_path,
            paths=paths,
        )

    @classmethod
    def _build_operation(cls, operation: GatewayOperation) -> EndpointOperation:
        action_namespace, action_name = parse_action_url(operation.backend_url)
        return EndpointOperation(
            extension=OperationExtension(
                backend_method=operation.backend_method,
                backend_url=operation.backend_url,
                policies=operation.policies,
                security=operation.security,
                action_name=action_name,
                action_namespace=action_namespace,
            ),
        )

    def to_gateway_api(self, tenant_id: str = None, api_id: str = None) -> GatewayApi:
        resources = {}
        for path, operations in self.paths.items():
            resources[path] = GatewayResource(
                operations={
                    verb.upper(): GatewayOperation(
                        backend_method=operation.extension.backend_method,
                        backend_url=operation.extension.backend_url,
                        policies=operation.extension.policies,
                        security=operation.extension.security,
                    )
                    for verb, operation in operations.items()
                }
            )

        return GatewayApi(
            id=api_id,
            tenant_id=tenant_id,
            name=self.info.title,
            base_path=self.base_path,
            resources=resources,
        )


@dataclass(frozen=True)
class EndpointSelector:
    path: str
    operation: Optional[str] = None

    def __post_init__(self):
        if self.operation:
            object.__setattr__(self, "operation", self.operation.lower())
