from dataclasses import dataclass
from typing import Optional

from routemgmt import settings
from routemgmt.exceptions import InputError
from routemgmt.models.base import KeyValue, confidential
from routemgmt.models.credentials import GatewayCredentials
from routemgmt.models.endpoint import EndpointSelector

NAMESPACE_OVERRIDE = "__ow_meta_namespace"


@dataclass(frozen=True)
class DeleteApiRequest:
    """Validated parameters of a single API deletion.

    Parameters (all as fields of the incoming message)
      gwUrl                Required. The API Gateway base URL (i.e. http://gw.com)
      gwUser               Optional. The API Gateway authentication
      gwPwd                Optional. The API Gateway authentication
      namespace            Required if __ow_meta_namespace is not specified. Namespace of API author
      __ow_meta_namespace  Required. Namespace of API author, wins over `namespace`
      tenantInstance       Optional. Instance identifier used when creating the API Gateway tenant
      basepath             Required. Base path or API name of the API
      relpath              Optional. Delete just this relative path from the API. Required if operation is specified
      operation            Optional. Delete just this relpath's operation from the API
    """

    credentials: GatewayCredentials
    namespace: str
    basepath: str
    tenant_instance: str = settings.DEFAULT_TENANT_INSTANCE
    relpath: Optional[str] = None
    operation: Optional[str] = None

    @classmethod
    def from_params(cls, params: KeyValue) -> 'DeleteApiRequest':
        error = cls.validate(params)
        if error:
            raise InputError(message=error)

        operation = params.get("operation") or None
        return cls(
            credentials=GatewayCredentials.from_user(
                gw_url=params["gwUrl"],
                gw_user=params.get("gwUser"),
                gw_pwd=params.get("gwPwd"),
            ),
            namespace=params.get(NAMESPACE_OVERRIDE) or params.get("namespace"),
            basepath=params["basepath"],
            tenant_instance=params.get("tenantInstance") or settings.DEFAULT_TENANT_INSTANCE,
            relpath=params.get("relpath") or None,
            operation=operation.lower() if operation else None,
        )

    @classmethod
    def validate(cls, params: KeyValue) -> str:
        if params is None or not isinstance(params, dict):
            return "Internal error. A message parameter was not supplied."

        if not params.get("gwUrl"):
            return "gwUrl is required."

        if not (params.get(NAMESPACE_OVERRIDE) or params.get("namespace")):
            return f"{NAMESPACE_OVERRIDE} is required."

        if not params.get("basepath"):
            return "basepath is required."

        if params.get("operation") and not params.get("relpath"):
            return "When specifying an operation, the relpath is required."

        return ""

    @property
    def deletes_entire_api(self) -> bool:
        return not self.relpath

    @property
    def selector(self) -> EndpointSelector:
        return EndpointSelector(path=self.relpath, operation=self.operation)

    def describe(self, params: KeyValue) -> KeyValue:
        return {
            "GW URL": self.credentials.gw_url,
            "GW User": confidential(params.get("gwUser")),
            "GW Pwd": confidential(params.get("gwPwd")),
            NAMESPACE_OVERRIDE: params.get(NAMESPACE_OVERRIDE),
            "namespace": self.namespace,
            "tenantInstance": f"{params.get('tenantInstance')} / {self.tenant_instance}",
            "basepath/name": self.basepath,
            "relpath": self.relpath,
            "operation": self.operation,
        }
