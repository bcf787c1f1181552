from dataclasses import dataclass

from routemgmt.exceptions import NotFoundError
from routemgmt.models.endpoint import EndpointDocument, EndpointSelector
from routemgmt.models.gateway_api import GatewayApi


@dataclass
class EndpointEditor:
    @classmethod
    def to_document(cls, api: GatewayApi) -> EndpointDocument:
        return EndpointDocument.from_gateway_api(api=api)

    @classmethod
    def remove_endpoint(cls, document: EndpointDocument, selector: EndpointSelector) -> EndpointDocument:
        """Return a copy of `document` without the selected operation, or the whole path.

        A path left without operations is dropped as well.
        """
        edited = document.model_copy(deep=True)

        operations = edited.paths.get(selector.path)
        if operations is None:
            raise NotFoundError(message=f"path {selector.path} does not exist in the API")

        if not selector.operation:
            del edited.paths[selector.path]
            return edited

        if selector.operation not in operations:
            raise NotFoundError(
                message=f"path {selector.path} with operation {selector.operation} does not exist in the API"
            )

        del operations[selector.operation]
        if not operations:
            del edited.paths[selector.path]
        return edited
