"""
Initia Models - typed on-chain entities with Amino, Data and Proto codecs.

This package provides:
- codec: the generic schema-driven codec, variant families, and errors
- coin, public_key: shared value types
- auth: base and vesting accounts
- gov, params, ibc, upgrade, distribution: proposals, content variants, votes, deposits
- authz, feegrant: authorizations, fee allowances, grants
- bank, staking, distribution, slashing: transaction messages and staking records
"""

import logging

from .codec import (
    CodecError,
    MalformedInputError,
    UnparsableNumberError,
    UnrecognizedTypeError,
    UnsupportedConversionError,
    ConfigurationError,
    CodecConfig,
    configure,
    get_config,
    load_config,
    parse_config,
    Entity,
    Family,
    WireFormat,
)
from .coin import Coin, Coins
from .public_key import PUBLIC_KEY, SimplePublicKey, Ed25519PublicKey
from .msg import MSG
from .auth import (
    ACCOUNT,
    BaseAccount,
    BaseVestingAccount,
    DelayedVestingAccount,
    ContinuousVestingAccount,
    Period,
    PeriodicVestingAccount,
)
from .gov import (
    CONTENT,
    TextProposal,
    ProposalStatus,
    TallyResult,
    ProposalLegacy,
    VoteOption,
    WeightedVoteOption,
    Vote,
    Deposit,
    MsgSubmitProposalLegacy,
    MsgDeposit,
    MsgVote,
)
from .params import ParamChange, ParameterChangeProposal
from .ibc import ClientUpdateProposal
from .bank import MsgSend
from .staking import (
    BondStatus,
    Description,
    CommissionRates,
    Commission,
    Validator,
    Delegation,
    UnbondingDelegationEntry,
    UnbondingDelegation,
    RedelegationEntry,
    Redelegation,
    MsgDelegate,
    MsgUndelegate,
    MsgBeginRedelegate,
    MsgCreateValidator,
)
from .distribution import (
    MsgSetWithdrawAddress,
    MsgWithdrawDelegatorReward,
    MsgWithdrawValidatorCommission,
    MsgFundCommunityPool,
    CommunityPoolSpendProposal,
)
from .slashing import MsgUnjail
from .upgrade import (
    Plan,
    SoftwareUpgradeProposal,
    CancelSoftwareUpgradeProposal,
    MsgSoftwareUpgrade,
    MsgCancelUpgrade,
)
from .feegrant import (
    ALLOWANCE,
    BasicAllowance,
    PeriodicAllowance,
    AllowedMsgAllowance,
    MsgGrantAllowance,
    MsgRevokeAllowance,
)
from .authz import (
    AUTHORIZATION,
    GenericAuthorization,
    SendAuthorization,
    AuthorizationType,
    StakeValidators,
    StakeAuthorization,
    AuthorizationGrant,
    MsgGrant,
    MsgRevoke,
    MsgExec,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "CodecError",
    "MalformedInputError",
    "UnparsableNumberError",
    "UnrecognizedTypeError",
    "UnsupportedConversionError",
    "ConfigurationError",
    # Config
    "CodecConfig",
    "configure",
    "get_config",
    "load_config",
    "parse_config",
    # Engine
    "Entity",
    "Family",
    "WireFormat",
    # Families
    "PUBLIC_KEY",
    "ACCOUNT",
    "CONTENT",
    "AUTHORIZATION",
    "ALLOWANCE",
    "MSG",
    # Values
    "Coin",
    "Coins",
    "SimplePublicKey",
    "Ed25519PublicKey",
    # Auth
    "BaseAccount",
    "BaseVestingAccount",
    "DelayedVestingAccount",
    "ContinuousVestingAccount",
    "Period",
    "PeriodicVestingAccount",
    # Governance
    "TextProposal",
    "ProposalStatus",
    "TallyResult",
    "ProposalLegacy",
    "VoteOption",
    "WeightedVoteOption",
    "Vote",
    "Deposit",
    "ParamChange",
    "ParameterChangeProposal",
    "ClientUpdateProposal",
    "CommunityPoolSpendProposal",
    "Plan",
    "SoftwareUpgradeProposal",
    "CancelSoftwareUpgradeProposal",
    # Authz
    "GenericAuthorization",
    "SendAuthorization",
    "AuthorizationType",
    "StakeValidators",
    "StakeAuthorization",
    "AuthorizationGrant",
    # Feegrant
    "BasicAllowance",
    "PeriodicAllowance",
    "AllowedMsgAllowance",
    # Staking
    "BondStatus",
    "Description",
    "CommissionRates",
    "Commission",
    "Validator",
    "Delegation",
    "UnbondingDelegationEntry",
    "UnbondingDelegation",
    "RedelegationEntry",
    "Redelegation",
    # Messages
    "MsgSend",
    "MsgDelegate",
    "MsgUndelegate",
    "MsgBeginRedelegate",
    "MsgCreateValidator",
    "MsgSetWithdrawAddress",
    "MsgWithdrawDelegatorReward",
    "MsgWithdrawValidatorCommission",
    "MsgFundCommunityPool",
    "MsgUnjail",
    "MsgSoftwareUpgrade",
    "MsgCancelUpgrade",
    "MsgGrantAllowance",
    "MsgRevokeAllowance",
    "MsgSubmitProposalLegacy",
    "MsgDeposit",
    "MsgVote",
    "MsgGrant",
    "MsgRevoke",
    "MsgExec",
]
