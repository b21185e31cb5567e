"""
Governance: proposal content, legacy proposals, votes, deposits, messages.
"""

from .content import CONTENT, TextProposal
from .proposal import ProposalStatus, TallyResult, ProposalLegacy
from .vote import VoteOption, WeightedVoteOption, Vote, Deposit
from .msgs import MsgSubmitProposalLegacy, MsgDeposit, MsgVote

__all__ = [
    # Content
    "CONTENT",
    "TextProposal",
    # Proposal
    "ProposalStatus",
    "TallyResult",
    "ProposalLegacy",
    # Votes
    "VoteOption",
    "WeightedVoteOption",
    "Vote",
    "Deposit",
    # Messages
    "MsgSubmitProposalLegacy",
    "MsgDeposit",
    "MsgVote",
]
