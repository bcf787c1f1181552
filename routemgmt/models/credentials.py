import base64
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class GatewayCredentials:
    gw_url: str
    gw_auth: Optional[str] = field(default=None, repr=False)

    @classmethod
    def from_user(cls, gw_url: str, gw_user: str = None, gw_pwd: str = None) -> 'GatewayCredentials':
        gw_auth = None
        if gw_user and gw_pwd:
            gw_auth = base64.b64encode(f"{gw_user}:{gw_pwd}".encode()).decode()
        return cls(gw_url=gw_url.rstrip("/"), gw_auth=gw_auth)

    @property
    def headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.gw_auth:
            headers["Authorization"] = f"Basic {self.gw_auth}"
        return headers

    def url(self, resource: str) -> str:
        return f"{self.gw_url}/{resource}"
