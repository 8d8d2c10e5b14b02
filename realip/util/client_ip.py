#!/usr/bin/env python3
"""
Utility functions for reading the client IP address in FastAPI routes
once RealIPMiddleware has resolved it.
"""
import ipaddress

from fastapi import Request

from realip.const import HEADER_X_REAL_IP


def get_client_ip(request: Request, header: str = HEADER_X_REAL_IP) -> str:
    """
    Get the client IP address from a FastAPI Request object.

    Args:
        request: FastAPI Request object
        header: destination header the middleware writes to

    Returns:
        str: Client IP address
    """
    real_ip = request.headers.get(header)
    if real_ip:
        return real_ip.strip()

    # Fallback to direct client IP
    client_host = request.client.host if request.client else "unknown"
    return client_host


def is_private_ip(ip: str) -> bool:
    """
    Check if an IP address is in a private range.

    Args:
        ip: IP address string

    Returns:
        bool: True if IP is private, False otherwise
    """
    try:
        return ipaddress.ip_address(ip).is_private
    except ValueError:
        return False
