"""Player model."""

from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass(frozen=True)
class Player:
    """
    A rostered player.

    `stats` is derived from the play log and replaced wholesale on every
    recompute. Nothing else writes to it.
    """

    id: str
    name: str
    jersey_number: Optional[int] = None
    position: Optional[str] = None
    stats: dict[str, float] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        """Name with jersey number, e.g. '#12 Sam Reed'."""
        if self.jersey_number is None:
            return self.name
        return f"#{self.jersey_number} {self.name}"

    def with_stats(self, stats: dict[str, float]) -> "Player":
        """Copy of this player carrying a fresh stat bucket."""
        return replace(self, stats=dict(stats))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "jersey_number": self.jersey_number,
            "position": self.position,
            "stats": dict(self.stats),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            jersey_number=data.get("jersey_number"),
            position=data.get("position"),
            stats=dict(data.get("stats") or {}),
        )
