import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from routemgmt.exceptions import AmbiguityError, DeletionError, NotFoundError
from routemgmt.models.base import KeyValue
from routemgmt.models.gateway_api import GatewayApi
from routemgmt.models.request import DeleteApiRequest
from routemgmt.pilot.gateway import GatewayClient
from routemgmt.services.endpoint_editor import EndpointEditor

logger = logging.getLogger()

FAILURE_PREFIX = "API deletion failure: "


class DeletionState(Enum):
    VALIDATING = "validating"
    RESOLVING_TENANT = "resolving_tenant"
    RESOLVING_API = "resolving_api"
    DELETING_API = "deleting_api"
    EDITING_ENDPOINT = "editing_endpoint"
    APPLYING_UPDATE = "applying_update"
    DONE = "done"
    FAILED = "failed"


TERMINAL_STATES = (DeletionState.DONE, DeletionState.FAILED)


@dataclass
class ApiDeletion:
    """Delete an API, or one of its paths or operations, from the API Gateway.

    1. Get the tenant associated with the namespace and tenant instance
    2. Get the API registered under that tenant with the base path (or API name)
    3. Without a relpath, delete the entire API from the gateway
    4. With a relpath (and maybe an operation), remove that endpoint from the API
       document and publish the whole document again in place of the old one

    An instance runs a single deletion.
    """

    client: GatewayClient = field(default_factory=GatewayClient)
    editor: EndpointEditor = field(default_factory=EndpointEditor)
    history: List[DeletionState] = field(default_factory=list)

    @property
    def state(self) -> DeletionState:
        return self.history[-1] if self.history else None

    def _enter(self, state: DeletionState) -> None:
        if state in self.history:
            raise RuntimeError(f"Deletion already went through {state.value}")
        if self.state in TERMINAL_STATES:
            raise RuntimeError(f"Deletion already finished as {self.state.value}")

        logger.info(f"API deletion: {state.value}")
        self.history.append(state)

    async def run(self, params: KeyValue) -> None:
        try:
            await self._run(params=params)
        except DeletionError as e:
            self._enter(DeletionState.FAILED)
            logger.error(f"{FAILURE_PREFIX}{e} [{e.kind.value}]")
            raise e.prefixed(FAILURE_PREFIX) from e

        self._enter(DeletionState.DONE)
        logger.info("deleteApi success")

    async def _run(self, params: KeyValue) -> None:
        self._enter(DeletionState.VALIDATING)
        request = DeleteApiRequest.from_params(params)
        for label, value in request.describe(params=params).items():
            logger.info(f"{label:<14}: {value}")

        tenant_id = await self.resolve_tenant(request=request)
        gw_api = await self.resolve_api(request=request, tenant_id=tenant_id)

        if request.deletes_entire_api:
            self._enter(DeletionState.DELETING_API)
            logger.info(f"Removing entire API {gw_api.base_path} from API GW")
            await self.client.delete_api(credentials=request.credentials, api_id=gw_api.id)
            return

        self._enter(DeletionState.EDITING_ENDPOINT)
        logger.info(f"Removing path {request.relpath}; operation {request.operation} from API {gw_api.base_path}")
        document = self.editor.to_document(api=gw_api)
        document = self.editor.remove_endpoint(document=document, selector=request.selector)

        self._enter(DeletionState.APPLYING_UPDATE)
        await self.client.replace_api(
            credentials=request.credentials,
            tenant_id=gw_api.tenant_id or tenant_id,
            document=document,
            api_id=gw_api.id,
        )

    async def resolve_tenant(self, request: DeleteApiRequest) -> str:
        self._enter(DeletionState.RESOLVING_TENANT)
        tenants = await self.client.list_tenants(
            credentials=request.credentials,
            namespace=request.namespace,
            instance=request.tenant_instance,
        )

        if not tenants:
            logger.warning(f"No Tenant found for namespace {request.namespace}")
            raise NotFoundError(message=f"No Tenant found for namespace {request.namespace}")

        if len(tenants) > 1:
            logger.error(
                f"Multiple tenants found for namespace {request.namespace} "
                f"and tenant instance {request.tenant_instance}"
            )
            raise AmbiguityError(
                message=f"Internal error. Multiple API Gateway tenants found for namespace {request.namespace} "
                f"and tenant instance {request.tenant_instance}"
            )

        tenant = tenants[0]
        logger.info(f"Got Tenant ID: {tenant.id}")
        return tenant.id

    async def resolve_api(self, request: DeleteApiRequest, tenant_id: str) -> GatewayApi:
        self._enter(DeletionState.RESOLVING_API)
        apis = await self.client.list_apis(
            credentials=request.credentials,
            tenant_id=tenant_id,
            basepath=request.basepath,
        )
        logger.info(f"Got {len(apis)} APIs")

        if not apis:
            logger.warning(
                f"No APIs found for namespace {request.namespace} with basepath/apiname {request.basepath}"
            )
            raise NotFoundError(message=f"API {request.basepath} does not exist.")

        if len(apis) > 1:
            logger.error(f"Multiple APIs found for namespace {request.namespace} with basepath {request.basepath}")
            raise AmbiguityError(
                message=f"Internal error. Multiple APIs found for namespace {request.namespace} "
                f"with basepath {request.basepath}"
            )

        return apis[0]
