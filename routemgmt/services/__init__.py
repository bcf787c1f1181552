from routemgmt.services.deletion import ApiDeletion, DeletionState
from routemgmt.services.endpoint_editor import EndpointEditor

__all__ = ("ApiDeletion", "DeletionState", "EndpointEditor")
