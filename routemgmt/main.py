import logging

from sanic import Sanic

from routemgmt import settings
from routemgmt import views
from routemgmt.exceptions import rest_error_handler
from routemgmt.models.base import KeyValue
from routemgmt.services.deletion import ApiDeletion

logging.getLogger().setLevel(settings.LOG_LEVEL)

app = Sanic(name='routemgmt', error_handler=rest_error_handler)
app.update_config(settings)

app.blueprint(views.api)


async def main(params: KeyValue) -> KeyValue:
    """Action entrypoint: an empty dict on success, raises DeletionError otherwise."""
    await ApiDeletion().run(params=params)
    return {}


def serve():
    app.run(host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    serve()
