"""
Legacy (v1beta1) governance messages.
"""

from dataclasses import dataclass

from ..codec import STRING, UINT64, Entity, any_of, wire
from ..coin import COINS, Coins
from ..msg import MSG
from .content import CONTENT
from .vote import VOTE_OPTION, VoteOption


@MSG.register
@dataclass
class MsgSubmitProposalLegacy(Entity):
    """Submit a content proposal with an initial deposit."""
    proto_name = "cosmos.gov.v1beta1.MsgSubmitProposal"
    type_url = "/cosmos.gov.v1beta1.MsgSubmitProposal"
    amino_type = "cosmos-sdk/MsgSubmitProposal"

    content: Entity = wire(any_of(CONTENT), 1)
    initial_deposit: Coins = wire(COINS, 2)
    proposer: str = wire(STRING, 3)


@MSG.register
@dataclass
class MsgDeposit(Entity):
    """Add coins to the deposit of a proposal."""
    proto_name = "cosmos.gov.v1beta1.MsgDeposit"
    type_url = "/cosmos.gov.v1beta1.MsgDeposit"
    amino_type = "cosmos-sdk/MsgDeposit"

    proposal_id: int = wire(UINT64, 1)
    depositor: str = wire(STRING, 2)
    amount: Coins = wire(COINS, 3)


@MSG.register
@dataclass
class MsgVote(Entity):
    """Cast a single-option vote on a proposal."""
    proto_name = "cosmos.gov.v1beta1.MsgVote"
    type_url = "/cosmos.gov.v1beta1.MsgVote"
    amino_type = "cosmos-sdk/MsgVote"

    proposal_id: int = wire(UINT64, 1)
    voter: str = wire(STRING, 2)
    option: VoteOption = wire(VOTE_OPTION, 3)
