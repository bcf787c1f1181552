from typing import Optional

from routemgmt.models.base import GatewayDocument


class Tenant(GatewayDocument):
    id: str
    namespace: Optional[str] = None
    instance: Optional[str] = None
