"""Threat list entries: online and taunt state and the effective threat value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

THREAT_UPDATE_INTERVAL = 1000


class TauntState(IntEnum):
    """Whether the victim is taunting the owner, detaunted, or neither."""

    DETAUNT = 0
    NONE = 1
    TAUNT = 2


class OnlineState(IntEnum):
    """How selectable a threat list entry currently is."""

    OFFLINE = 0
    SUPPRESSED = 1
    ONLINE = 2


@dataclass
class ThreatReference:
    """One entry on an owner's threat list, naming the victim that threatens it.

    ``base_amount`` is the accumulated threat; ``temp_modifier`` is the
    integer adjustment from temporary effects. A new entry starts offline
    with no taunt and zero threat.
    """

    owner: Any = None
    victim: Any = None
    base_amount: float = 0.0
    temp_modifier: int = 0
    online: OnlineState = OnlineState.OFFLINE
    taunted: TauntState = TauntState.NONE

    def __post_init__(self) -> None:
        self.online = OnlineState(self.online)
        self.taunted = TauntState(self.taunted)
        self.temp_modifier = int(self.temp_modifier)

    def threat(self) -> float:
        """Effective threat: base amount plus temporary modifier, never below zero."""
        return max(float(self.base_amount) + float(self.temp_modifier), 0.0)

    def is_online(self) -> bool:
        """True when the entry is fully online."""
        return self.online >= OnlineState.ONLINE

    def is_available(self) -> bool:
        """True when the entry can be selected at all (online or suppressed)."""
        return self.online > OnlineState.OFFLINE

    def is_suppressed(self) -> bool:
        """True when the entry is selectable but inopportune."""
        return self.online == OnlineState.SUPPRESSED

    def is_offline(self) -> bool:
        """True when the entry can never be selected."""
        return self.online <= OnlineState.OFFLINE

    def taunt_state(self) -> TauntState:
        """The effective taunt state of the entry."""
        return TauntState.TAUNT if self.is_taunting() else self.taunted

    def is_taunting(self) -> bool:
        """True when the victim is taunting the owner."""
        return self.taunted >= TauntState.TAUNT

    def is_detaunted(self) -> bool:
        """True when the victim is detaunted."""
        return self.taunted == TauntState.DETAUNT