"""
Votes and deposits on legacy proposals.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum
from typing import List

from ..codec import DEC, STRING, UINT64, Entity, enum_of, nested, repeated, wire
from ..coin import COINS, Coins


class VoteOption(IntEnum):
    VOTE_OPTION_UNSPECIFIED = 0
    VOTE_OPTION_YES = 1
    VOTE_OPTION_ABSTAIN = 2
    VOTE_OPTION_NO = 3
    VOTE_OPTION_NO_WITH_VETO = 4


VOTE_OPTION = enum_of(VoteOption, "cosmos.gov.v1beta1.VoteOption")


@dataclass
class WeightedVoteOption(Entity):
    """One option of a split vote; weights of a vote sum to 1."""
    proto_name = "cosmos.gov.v1beta1.WeightedVoteOption"

    option: VoteOption = wire(VOTE_OPTION, 1)
    weight: Decimal = wire(DEC, 2)


@dataclass
class Vote(Entity):
    """A voter's (possibly weighted) vote on a proposal."""
    proto_name = "cosmos.gov.v1beta1.Vote"

    proposal_id: int = wire(UINT64, 1)
    voter: str = wire(STRING, 2)
    options: List[WeightedVoteOption] = wire(repeated(nested(WeightedVoteOption)), 4)

    Option = VoteOption


@dataclass
class Deposit(Entity):
    """Coins deposited on a proposal by one depositor."""
    proto_name = "cosmos.gov.v1beta1.Deposit"

    proposal_id: int = wire(UINT64, 1)
    depositor: str = wire(STRING, 2)
    amount: Coins = wire(COINS, 3)
