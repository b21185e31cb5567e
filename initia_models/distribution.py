"""
Distribution: reward withdrawal messages and community pool proposals.
"""

from dataclasses import dataclass

from .codec import STRING, Entity, wire
from .coin import COINS, Coins
from .gov.content import CONTENT
from .msg import MSG


@MSG.register
@dataclass
class MsgSetWithdrawAddress(Entity):
    """Direct future rewards of a delegator to ``withdraw_address``."""
    proto_name = "cosmos.distribution.v1beta1.MsgSetWithdrawAddress"
    type_url = "/cosmos.distribution.v1beta1.MsgSetWithdrawAddress"
    amino_type = "cosmos-sdk/MsgModifyWithdrawAddress"

    delegator_address: str = wire(STRING, 1)
    withdraw_address: str = wire(STRING, 2)


@MSG.register
@dataclass
class MsgWithdrawDelegatorReward(Entity):
    """Withdraw a delegator's accumulated rewards from one validator."""
    proto_name = "cosmos.distribution.v1beta1.MsgWithdrawDelegatorReward"
    type_url = "/cosmos.distribution.v1beta1.MsgWithdrawDelegatorReward"
    amino_type = "cosmos-sdk/MsgWithdrawDelegationReward"

    delegator_address: str = wire(STRING, 1)
    validator_address: str = wire(STRING, 2)


@MSG.register
@dataclass
class MsgWithdrawValidatorCommission(Entity):
    """Withdraw a validator's accumulated commission."""
    proto_name = "cosmos.distribution.v1beta1.MsgWithdrawValidatorCommission"
    type_url = "/cosmos.distribution.v1beta1.MsgWithdrawValidatorCommission"
    amino_type = "cosmos-sdk/MsgWithdrawValCommission"

    validator_address: str = wire(STRING, 1)


@MSG.register
@dataclass
class MsgFundCommunityPool(Entity):
    """Send coins from ``depositor`` into the community pool."""
    proto_name = "cosmos.distribution.v1beta1.MsgFundCommunityPool"
    type_url = "/cosmos.distribution.v1beta1.MsgFundCommunityPool"
    amino_type = "cosmos-sdk/MsgFundCommunityPool"

    amount: Coins = wire(COINS, 1)
    depositor: str = wire(STRING, 2)


@CONTENT.register
@dataclass
class CommunityPoolSpendProposal(Entity):
    """Proposal to pay ``amount`` from the community pool to ``recipient``."""
    proto_name = "cosmos.distribution.v1beta1.CommunityPoolSpendProposal"
    type_url = "/cosmos.distribution.v1beta1.CommunityPoolSpendProposal"
    amino_type = "cosmos-sdk/CommunityPoolSpendProposal"

    title: str = wire(STRING, 1)
    description: str = wire(STRING, 2)
    recipient: str = wire(STRING, 3)
    amount: Coins = wire(COINS, 4)
