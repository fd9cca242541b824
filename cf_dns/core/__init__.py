"""
Core command handling.

This package contains the command tree, the dispatcher, the session state
and the record command handlers.
"""

from .dns_manager import DNSManager, build_command_tree
from .record_manager import Outcome
from .session import Session

__all__ = ["DNSManager", "Outcome", "Session", "build_command_tree"]
