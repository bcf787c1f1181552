from typing import Dict, Any, Optional

from pydantic import BaseModel, ConfigDict

KeyValue = Dict[str, Any]

CONFIDENTIAL_MASK = "XXXXXXXXXX"


def confidential(value: Optional[str]) -> Optional[str]:
    return CONFIDENTIAL_MASK if value else None


class GatewayDocument(BaseModel):
    # The gateway speaks camelCase and may add fields this service does not know about
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def serialize(self) -> KeyValue:
        return self.model_dump(by_alias=True, exclude_none=True)
