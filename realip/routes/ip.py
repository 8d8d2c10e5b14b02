#!/usr/bin/env python3
from fastapi import APIRouter, Request
from realip.models.generic import ClientIp
from realip.util.client_ip import get_client_ip, is_private_ip

router = APIRouter()


@router.get(
    "/ip",
    description="Returns the client address resolved by the real ip middleware.",
    response_model=ClientIp,
    status_code=200,
)
def client_ip(request: Request):
    config = request.app.state.realip_config
    ip = get_client_ip(request, header=config.destination_header)
    return {"client_ip": ip, "private": is_private_ip(ip)}
