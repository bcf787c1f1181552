from sanic import Blueprint

from routemgmt.views.api_views import actions, apis

api = Blueprint.group(apis, actions)

__all__ = ("api",)
