#!/usr/bin/env python3
import os

from dotenv import load_dotenv

load_dotenv()

# Popular headers
HEADER_X_FORWARDED_FOR = "x-forwarded-for"
HEADER_X_REAL_IP = "x-real-ip"
# Structured `Forwarded` header (RFC 7239), not supported as a source header
HEADER_FORWARDED = "forwarded"

# [REALIP_TRUSTED_RANGES]
# Comma separated CIDR ranges allowed to supply the client address,
# e.g. "127.0.0.1/32, 192.168.0.0/16". Empty means every peer is trusted.
REALIP_TRUSTED_RANGES = [
    i.strip()
    for i in (os.getenv("REALIP_TRUSTED_RANGES") or "").split(",")
    if i.strip()
]
REALIP_SOURCE_HEADER = os.getenv("REALIP_SOURCE_HEADER") or HEADER_X_REAL_IP
REALIP_DESTINATION_HEADER = (
    os.getenv("REALIP_DESTINATION_HEADER") or HEADER_X_REAL_IP
)
REALIP_RECURSIVE = os.getenv("REALIP_RECURSIVE") == "True"

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").upper()

# FastAPI configuration
API_HOST = os.getenv("API_HOST") or "0.0.0.0"
API_PORT = int(os.getenv("API_PORT") or 7068)
