"""
Coin and Coins.

Amounts are arbitrary-precision integers; they travel as decimal strings
in every wire format (cosmos ``Int`` is a string in proto as well).
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Union

from .codec import STRING, UBIGINT, Entity, nested, wire
from .codec.kinds import RepeatedKind


@dataclass
class Coin(Entity):
    """A single denomination and amount."""
    proto_name = "cosmos.base.v1beta1.Coin"

    denom: str = wire(STRING, 1)
    amount: int = wire(UBIGINT, 2)

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


class Coins:
    """
    Collection of coins keyed by denomination.

    Coins are kept sorted by denom and duplicate denominations are merged,
    so two collections holding the same amounts compare equal regardless
    of construction order.
    """

    def __init__(self, coins: Union[Iterable[Coin], Mapping[str, int], None] = None):
        amounts: Dict[str, int] = {}
        if isinstance(coins, Mapping):
            items = [Coin(denom, amount) for denom, amount in coins.items()]
        else:
            items = list(coins or [])
        for coin in items:
            amounts[coin.denom] = amounts.get(coin.denom, 0) + coin.amount
        self._coins: List[Coin] = [Coin(denom, amounts[denom]) for denom in sorted(amounts)]

    def __iter__(self) -> Iterator[Coin]:
        return iter(self._coins)

    def __len__(self) -> int:
        return len(self._coins)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Coins):
            return NotImplemented
        return self._coins == other._coins

    def __repr__(self) -> str:
        return f"Coins({self._coins!r})"

    def __str__(self) -> str:
        return ",".join(str(c) for c in self._coins)

    def get(self, denom: str) -> Optional[Coin]:
        for coin in self._coins:
            if coin.denom == denom:
                return coin
        return None

    def denoms(self) -> List[str]:
        return [c.denom for c in self._coins]

    def to_list(self) -> List[Coin]:
        return list(self._coins)


class CoinsKind(RepeatedKind):
    """Repeated Coin field surfaced as a Coins collection."""

    def __init__(self):
        super().__init__(nested(Coin))

    def empty(self):
        return Coins()

    def collect(self, items):
        return Coins(items)

    def coerce(self, value):
        if isinstance(value, Mapping) and all(isinstance(a, int) for a in value.values()):
            return Coins(value)
        if isinstance(value, (list, tuple)) and all(isinstance(c, Coin) for c in value):
            return Coins(value)
        return value


COINS = CoinsKind()
