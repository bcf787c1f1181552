from typing import Any, Dict

from sanic.request import Request
from sanic.response import HTTPResponse, json
from sanic.views import HTTPMethodView

from routemgmt import settings
from routemgmt.services.deletion import ApiDeletion

PayloadType = Dict[str, Any]


class DeletionViewBase(HTTPMethodView):
    def _parse_body(self, request: Request) -> PayloadType:
        params = settings.bound_params()
        params.update(request.json or {})
        return params

    async def perform_delete(self, request: Request) -> HTTPResponse:
        params = self._parse_body(request=request)
        await ApiDeletion().run(params=params)
        return json({}, 200)
