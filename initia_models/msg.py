"""
MSG family: every transaction message this library can decode.

Message classes live next to their module (bank, staking, gov, authz) and
register themselves here.
"""

from .codec import Family


MSG = Family("message")
