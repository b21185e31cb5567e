"""
Pytest configuration and shared sample entities.
"""

import json
from datetime import datetime, timezone

import pytest

from initia_models import (
    BaseAccount,
    BaseVestingAccount,
    Coin,
    Coins,
    MsgExec,
    MsgSend,
    MsgVote,
    Period,
    PeriodicVestingAccount,
    ProposalLegacy,
    ProposalStatus,
    SimplePublicKey,
    TallyResult,
    TextProposal,
    VoteOption,
    configure,
    get_config,
)


UTC = timezone.utc


@pytest.fixture(autouse=True)
def restore_codec_config():
    """Tests may install their own config; put the previous one back."""
    previous = get_config()
    yield
    configure(previous)


def _round_trip(entity, fmt: str):
    """Encode an entity in one format (through real JSON text / bytes) and decode it back."""
    cls = type(entity)
    if fmt == "amino":
        return cls.from_amino(json.loads(json.dumps(entity.to_amino())))
    if fmt == "data":
        return cls.from_data(json.loads(json.dumps(entity.to_data())))
    if fmt == "proto":
        return cls.from_proto_bytes(entity.to_proto_bytes())
    raise ValueError(fmt)


@pytest.fixture
def round_trip():
    """Function that encodes and decodes an entity in a named format."""
    return _round_trip


@pytest.fixture
def text_proposal() -> TextProposal:
    return TextProposal(title="Test", description="Desc")


@pytest.fixture
def proposal(text_proposal) -> ProposalLegacy:
    return ProposalLegacy(
        id=1,
        content=text_proposal,
        status=ProposalStatus.PROPOSAL_STATUS_VOTING_PERIOD,
        final_tally_result=TallyResult(yes=100, abstain=0, no=0, no_with_veto=0),
        submit_time=datetime(2024, 1, 1, tzinfo=UTC),
        deposit_end_time=datetime(2024, 1, 3, 12, 30, tzinfo=UTC),
        total_deposit=Coins([Coin("uinit", 1000000)]),
        voting_start_time=datetime(2024, 1, 2, 8, 0, 0, 250000, tzinfo=UTC),
        voting_end_time=datetime(2024, 1, 9, 8, 0, tzinfo=UTC),
    )


@pytest.fixture
def pub_key() -> SimplePublicKey:
    return SimplePublicKey(key=bytes([2]) + bytes(range(32)))


@pytest.fixture
def base_account(pub_key) -> BaseAccount:
    return BaseAccount(
        address="init1qqqsyqcyq5rqwzqfpg9scrgwpugpzysn5fzpv5",
        account_number=42,
        sequence=7,
        pub_key=pub_key,
    )


@pytest.fixture
def base_vesting_account(base_account) -> BaseVestingAccount:
    return BaseVestingAccount(
        base_account=base_account,
        original_vesting=Coins([Coin("uinit", 5000000)]),
        delegated_free=Coins(),
        delegated_vesting=Coins([Coin("uinit", 1000)]),
        end_time=1735689600,
    )


@pytest.fixture
def periodic_account(base_vesting_account) -> PeriodicVestingAccount:
    return PeriodicVestingAccount(
        base_vesting_account=base_vesting_account,
        start_time=1704067200,
        vesting_periods=[
            Period(length=2592000, amount=Coins([Coin("uinit", 2500000)])),
            Period(length=2592000, amount=Coins([Coin("uinit", 2500000)])),
        ],
    )


@pytest.fixture
def msg_send() -> MsgSend:
    return MsgSend(
        from_address="init1sender",
        to_address="init1receiver",
        amount=Coins([Coin("uinit", 10), Coin("uusdc", 123456789012345678901234)]),
    )


@pytest.fixture
def msg_exec(msg_send) -> MsgExec:
    return MsgExec(
        grantee="init1grantee",
        msgs=[
            msg_send,
            MsgVote(proposal_id=3, voter="init1voter", option=VoteOption.VOTE_OPTION_NO_WITH_VETO),
        ],
    )
