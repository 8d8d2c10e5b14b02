from pydantic import BaseModel
from typing import List


class RealIPConfig(BaseModel):
    source_header: str = "x-real-ip"
    destination_header: str = "x-real-ip"
    trusted_ranges: List[str] = ["127.0.0.1/32", "192.168.0.0/16"]
    recursive: bool = False


class HealthCheck(BaseModel):
    timestamp: int = 1777777777
    status: str = "ok"
    config: RealIPConfig


class ClientIp(BaseModel):
    client_ip: str = "1.1.1.1"
    private: bool = False
