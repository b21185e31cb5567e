"""
Feegrant: fee allowances and grant/revoke messages.
"""

from .allowances import ALLOWANCE, BasicAllowance, PeriodicAllowance, AllowedMsgAllowance
from .msgs import MsgGrantAllowance, MsgRevokeAllowance

__all__ = [
    # Allowances
    "ALLOWANCE",
    "BasicAllowance",
    "PeriodicAllowance",
    "AllowedMsgAllowance",
    # Messages
    "MsgGrantAllowance",
    "MsgRevokeAllowance",
]
