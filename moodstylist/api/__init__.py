"""Clients for the hosted AI gateway."""

from .gateway_client import GatewayClient, GatewayRequestError

__all__ = ["GatewayClient", "GatewayRequestError"]
