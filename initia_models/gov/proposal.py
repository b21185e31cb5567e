"""
Legacy (v1beta1) governance proposal.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

from ..codec import BIGINT, TIMESTAMP, UINT64, Entity, any_of, enum_of, nested, wire
from ..coin import COINS, Coins
from .content import CONTENT


class ProposalStatus(IntEnum):
    """Lifecycle stage of a proposal."""
    PROPOSAL_STATUS_UNSPECIFIED = 0
    PROPOSAL_STATUS_DEPOSIT_PERIOD = 1
    PROPOSAL_STATUS_VOTING_PERIOD = 2
    PROPOSAL_STATUS_PASSED = 3
    PROPOSAL_STATUS_REJECTED = 4
    PROPOSAL_STATUS_FAILED = 5


@dataclass
class TallyResult(Entity):
    """Vote totals; each an arbitrary-precision integer."""
    proto_name = "cosmos.gov.v1beta1.TallyResult"

    yes: int = wire(BIGINT, 1)
    abstain: int = wire(BIGINT, 2)
    no: int = wire(BIGINT, 3)
    no_with_veto: int = wire(BIGINT, 4)


@dataclass
class ProposalLegacy(Entity):
    """
    Stores information pertaining to a submitted proposal, such as its
    status and the time of the voting period.

    Amino names the id ``id``; Data and Proto name it ``proposal_id``.
    """
    proto_name = "cosmos.gov.v1beta1.Proposal"

    id: int = wire(UINT64, 1, data="proposal_id", proto="proposal_id")
    content: Entity = wire(any_of(CONTENT), 2)
    status: ProposalStatus = wire(enum_of(ProposalStatus, "cosmos.gov.v1beta1.ProposalStatus"), 3)
    final_tally_result: TallyResult = wire(nested(TallyResult), 4)
    submit_time: datetime = wire(TIMESTAMP, 5)
    deposit_end_time: datetime = wire(TIMESTAMP, 6)
    total_deposit: Coins = wire(COINS, 7)
    voting_start_time: datetime = wire(TIMESTAMP, 8)
    voting_end_time: datetime = wire(TIMESTAMP, 9)

    Status = ProposalStatus
