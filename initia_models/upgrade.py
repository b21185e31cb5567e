"""
Software upgrade plans, proposals and messages.
"""

from dataclasses import dataclass

from .codec import INT64, STRING, Entity, nested, wire
from .gov.content import CONTENT
from .msg import MSG


@dataclass
class Plan(Entity):
    """
    An upgrade scheduled at ``height``. ``info`` usually carries a JSON
    document with binary download links.
    """
    proto_name = "cosmos.upgrade.v1beta1.Plan"

    # Field 2 (time) and 5 (upgraded_client_state) are deprecated upstream
    name: str = wire(STRING, 1)
    height: int = wire(INT64, 3)
    info: str = wire(STRING, 4)


@CONTENT.register
@dataclass
class SoftwareUpgradeProposal(Entity):
    """Legacy proposal scheduling an upgrade plan."""
    proto_name = "cosmos.upgrade.v1beta1.SoftwareUpgradeProposal"
    type_url = "/cosmos.upgrade.v1beta1.SoftwareUpgradeProposal"
    amino_type = "cosmos-sdk/SoftwareUpgradeProposal"

    title: str = wire(STRING, 1)
    description: str = wire(STRING, 2)
    plan: Plan = wire(nested(Plan), 3)


@CONTENT.register
@dataclass
class CancelSoftwareUpgradeProposal(Entity):
    """Cancel the currently scheduled upgrade plan."""
    proto_name = "cosmos.upgrade.v1beta1.CancelSoftwareUpgradeProposal"
    type_url = "/cosmos.upgrade.v1beta1.CancelSoftwareUpgradeProposal"
    amino_type = "cosmos-sdk/CancelSoftwareUpgradeProposal"

    title: str = wire(STRING, 1)
    description: str = wire(STRING, 2)


@MSG.register
@dataclass
class MsgSoftwareUpgrade(Entity):
    """Governance-gated upgrade schedule; ``authority`` is the gov module account."""
    proto_name = "cosmos.upgrade.v1beta1.MsgSoftwareUpgrade"
    type_url = "/cosmos.upgrade.v1beta1.MsgSoftwareUpgrade"
    amino_type = "cosmos-sdk/MsgSoftwareUpgrade"

    authority: str = wire(STRING, 1)
    plan: Plan = wire(nested(Plan), 2)


@MSG.register
@dataclass
class MsgCancelUpgrade(Entity):
    """Cancel the scheduled upgrade; ``authority`` is the gov module account."""
    proto_name = "cosmos.upgrade.v1beta1.MsgCancelUpgrade"
    type_url = "/cosmos.upgrade.v1beta1.MsgCancelUpgrade"
    amino_type = "cosmos-sdk/MsgCancelUpgrade"

    authority: str = wire(STRING, 1)
