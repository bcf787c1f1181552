from typing import List

from routemgmt.models.credentials import GatewayCredentials
from routemgmt.models.endpoint import EndpointDocument
from routemgmt.models.gateway_api import GatewayApi
from routemgmt.models.tenant import Tenant
from routemgmt.pilot.base import GatewayPilotAPI


class GatewayClient(GatewayPilotAPI):
    async def list_tenants(self, credentials: GatewayCredentials, namespace: str, instance: str = None) -> List[Tenant]:
        params = {"filter[where][namespace]": namespace}
        if instance:
            params["filter[where][instance]"] = instance

        return await self._list(
            resource="tenants",
            model=Tenant,
            credentials=credentials,
            failure="Unable to get tenant",
            params=params,
        )

    async def list_apis(self, credentials: GatewayCredentials, tenant_id: str, basepath: str = None) -> List[GatewayApi]:
        params = {}
        if basepath:
            # Anything not starting with a slash is an API name
            field_name = "basePath" if basepath.startswith("/") else "name"
            params[f"filter[where][{field_name}]"] = basepath

        return await self._list(
            resource=f"tenants/{tenant_id}/apis",
            model=GatewayApi,
            credentials=credentials,
            failure="Unable to get API",
            params=params,
        )

    async def delete_api(self, credentials: GatewayCredentials, api_id: str) -> None:
        await self._request(
            method="DELETE",
            resource=f"apis/{api_id}",
            credentials=credentials,
            failure="Unable to delete the API",
            expected=(200, 204),
        )

    async def replace_api(
        self,
        credentials: GatewayCredentials,
        tenant_id: str,
        document: EndpointDocument,
        api_id: str,
    ) -> None:
        gw_api = document.to_gateway_api(tenant_id=tenant_id)
        await self._request(
            method="PUT",
            resource=f"apis/{api_id}",
            credentials=credentials,
            failure="Unable to update API",
            expected=(200, 201),
            json=gw_api.serialize(),
        )
