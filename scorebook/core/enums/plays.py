"""Play type definitions and the sides/roles a play refers to."""

from enum import Enum
from typing import Union


class PlayType(str, Enum):
    """
    Every kind of play the scorer can record.

    Values are the strings stored in the play log. Use `parse` to read
    them back.
    """

    # Offense
    RUSH = "rush"
    RUSH_TD = "rush_td"
    KNEEL = "kneel"
    PASS_COMPLETE = "pass_complete"
    PASS_TD = "pass_td"
    PASS_INCOMPLETE = "pass_incomplete"
    RECEPTION = "reception"  # Legacy entry, superseded by pass_complete
    DROP = "drop"
    INTERCEPTION = "interception"
    SACK = "sack"

    # Scoring / kicking
    FIELD_GOAL_MADE = "field_goal_made"
    FIELD_GOAL_MISSED = "field_goal_missed"
    BLOCKED_FIELD_GOAL = "blocked_field_goal"
    EXTRA_POINT_KICK_MADE = "extra_point_kick_made"
    EXTRA_POINT_KICK_MISSED = "extra_point_kick_missed"
    BLOCKED_PAT = "blocked_pat"
    TWO_POINT_CONVERSION_MADE = "two_point_conversion_made"
    TWO_POINT_CONVERSION_FAILED = "two_point_conversion_failed"
    SAFETY = "safety"

    # Defense
    TACKLE = "tackle"
    TACKLE_FOR_LOSS = "tackle_for_loss"
    FUMBLE_RECOVERY = "fumble_recovery"
    FORCED_FUMBLE = "forced_fumble"
    PASS_DEFENSED = "pass_defensed"
    MISSED_TACKLE = "missed_tackle"

    # Special teams
    KICKOFF = "kickoff"
    KICKOFF_RETURN = "kickoff_return"
    PUNT = "punt"
    PUNT_RETURN = "punt_return"
    BLOCKED_PUNT = "blocked_punt"

    # Other
    PENALTY = "penalty"
    TIMEOUT = "timeout"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> Union["PlayType", str]:
        """
        Convert a stored value to a PlayType.

        Unrecognised values are returned unchanged so that logs written by a
        newer client still load; they simply tally nothing.
        """
        try:
            return cls(value)
        except ValueError:
            return value

    @property
    def is_touchdown(self) -> bool:
        """Offensive touchdown types."""
        return self in (PlayType.RUSH_TD, PlayType.PASS_TD)


class TeamSide(str, Enum):
    """Which side executed a play."""

    HOME = "home"
    AWAY = "away"

    @property
    def opposite(self) -> "TeamSide":
        return TeamSide.AWAY if self is TeamSide.HOME else TeamSide.HOME


class ParticipantRole(str, Enum):
    """Role a player had on a play."""

    RUSHER = "rusher"
    PASSER = "passer"
    RECEIVER = "receiver"
    TACKLER = "tackler"
    ASSIST = "assist"
    KICKER = "kicker"
    HOLDER = "holder"
    RETURNER = "returner"
    BLOCKER = "blocker"
    OTHER = "other"


class TackleMode(str, Enum):
    """How shared tackles are credited (carried in rules, not yet applied)."""

    EQUAL = "equal"
    WEIGHTED = "weighted"


class FieldDirection(str, Enum):
    """Direction the team in possession is attacking on the scorer's field view."""

    LEFT_TO_RIGHT = "left-to-right"
    RIGHT_TO_LEFT = "right-to-left"

    @property
    def flipped(self) -> "FieldDirection":
        if self is FieldDirection.LEFT_TO_RIGHT:
            return FieldDirection.RIGHT_TO_LEFT
        return FieldDirection.LEFT_TO_RIGHT
