"""
Public keys.

In Amino a public key's value is the bare base64 key:

    {"type": "tendermint/PubKeySecp256k1", "value": "A1b2..."}
"""

from dataclasses import dataclass

from .codec import BYTES, Entity, Family, wire


PUBLIC_KEY = Family("public key")


@PUBLIC_KEY.register
@dataclass
class SimplePublicKey(Entity):
    """secp256k1 public key (33-byte compressed point)."""
    proto_name = "cosmos.crypto.secp256k1.PubKey"
    type_url = "/cosmos.crypto.secp256k1.PubKey"
    amino_type = "tendermint/PubKeySecp256k1"
    amino_value_field = "key"

    key: bytes = wire(BYTES, 1)


@PUBLIC_KEY.register
@dataclass
class Ed25519PublicKey(Entity):
    """ed25519 public key (32 bytes), used by validator consensus keys."""
    proto_name = "cosmos.crypto.ed25519.PubKey"
    type_url = "/cosmos.crypto.ed25519.PubKey"
    amino_type = "tendermint/PubKeyEd25519"
    amino_value_field = "key"

    key: bytes = wire(BYTES, 1)
