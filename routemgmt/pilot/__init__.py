from routemgmt.pilot.gateway import GatewayClient

__all__ = ("GatewayClient",)
