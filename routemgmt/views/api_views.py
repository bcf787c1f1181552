from sanic import Blueprint
from sanic.request import Request
from sanic.response import HTTPResponse

from routemgmt.views.base import DeletionViewBase

apis = Blueprint('apis', url_prefix='/apis')
actions = Blueprint('actions', url_prefix='/actions')


class ApiDeletionView(DeletionViewBase):
    async def delete(self, request: Request) -> HTTPResponse:
        return await self.perform_delete(request=request)


class DeleteApiActionView(DeletionViewBase):
    async def post(self, request: Request) -> HTTPResponse:
        return await self.perform_delete(request=request)


apis.add_route(ApiDeletionView.as_view(), '/', strict_slashes=False)
actions.add_route(DeleteApiActionView.as_view(), '/delete-api')
