from typing import Any, Dict, Optional

from pydantic import Field

from routemgmt.models.base import GatewayDocument


class GatewayOperation(GatewayDocument):
    backend_method: Optional[str] = Field(None, alias="backendMethod")
    backend_url: Optional[str] = Field(None, alias="backendUrl")
    policies: Any = None
    security: Any = None


class GatewayResource(GatewayDocument):
    # Keyed by upper-case HTTP verb
    operations: Dict[str, GatewayOperation] = Field(default_factory=dict)


class GatewayApi(GatewayDocument):
    id: Optional[str] = None
    tenant_id: Optional[str] = Field(None, alias="tenantId")
    name: Optional[str] = None
    base_path: Optional[str] = Field(None, alias="basePath")
    managed_url: Optional[str] = Field(None, alias="managedUrl")
    resources: Dict[str, GatewayResource] = Field(default_factory=dict)
