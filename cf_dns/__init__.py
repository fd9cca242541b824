"""
cf-dns - View and modify Cloudflare DNS records from the command line

An interactive shell and one-shot command runner for listing, adding,
updating and deleting DNS records in a Cloudflare account.
"""

__version__ = "1.0.0"
__author__ = "cf-dns developers"
__description__ = "View and modify Cloudflare DNS records from the command line"

from .core.dns_manager import DNSManager
from .core.session import Session
from .providers.dns_client import DNSClient

__all__ = [
    "DNSManager",
    "Session",
    "DNSClient",
]
