from routemgmt.models.credentials import GatewayCredentials
from routemgmt.models.endpoint import EndpointDocument, EndpointOperation, EndpointSelector
from routemgmt.models.gateway_api import GatewayApi, GatewayOperation, GatewayResource
from routemgmt.models.request import DeleteApiRequest
from routemgmt.models.tenant import Tenant

__all__ = (
    'DeleteApiRequest',
    'EndpointDocument',
    'EndpointOperation',
    'EndpointSelector',
    'GatewayApi',
    'GatewayCredentials',
    'GatewayOperation',
    'GatewayResource',
    'Tenant',
)
