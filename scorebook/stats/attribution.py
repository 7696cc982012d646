"""
Attribution - decide which players get credit for a play.

Resolution is two-tiered:

1. Explicit: participants recorded on the play under the requested role.
   Each one receives full credit; the participant `credit` weight is
   carried on the record but not applied here.
2. Fallback: plays entered before participant lists existed only carry
   `player_id`. That player is credited when the play type maps to the
   requested role in FALLBACK_ROLES.

Anything else resolves to no players.
"""

from typing import Iterable, Optional, Union

from scorebook.core.enums import ParticipantRole, PlayType
from scorebook.core.models.play import Play


FALLBACK_ROLES: dict[PlayType, ParticipantRole] = {
    PlayType.RUSH: ParticipantRole.RUSHER,
    PlayType.RUSH_TD: ParticipantRole.RUSHER,
    PlayType.KNEEL: ParticipantRole.RUSHER,
    PlayType.PASS_COMPLETE: ParticipantRole.PASSER,
    PlayType.PASS_TD: ParticipantRole.PASSER,
    PlayType.PASS_INCOMPLETE: ParticipantRole.PASSER,
    PlayType.INTERCEPTION: ParticipantRole.PASSER,
    PlayType.SACK: ParticipantRole.PASSER,
    PlayType.KICKOFF: ParticipantRole.KICKER,
    PlayType.PUNT: ParticipantRole.KICKER,
    PlayType.FIELD_GOAL_MADE: ParticipantRole.KICKER,
    PlayType.FIELD_GOAL_MISSED: ParticipantRole.KICKER,
    PlayType.EXTRA_POINT_KICK_MADE: ParticipantRole.KICKER,
    PlayType.EXTRA_POINT_KICK_MISSED: ParticipantRole.KICKER,
    PlayType.KICKOFF_RETURN: ParticipantRole.RETURNER,
    PlayType.PUNT_RETURN: ParticipantRole.RETURNER,
}


def fallback_role(play_type: Union[PlayType, str]) -> Optional[ParticipantRole]:
    """Role implied for `player_id` on a play without participants."""
    return FALLBACK_ROLES.get(play_type)


def resolve_role(play: Play, role: ParticipantRole) -> list[str]:
    """
    Player ids credited under `role` on this play.

    Explicit participants win; `player_id` is only used when no
    participant carries the role.
    """
    explicit = [p.player_id for p in play.participants_with_role(role)]
    if explicit:
        return explicit

    if play.player_id and fallback_role(play.type) == role:
        return [play.player_id]

    return []


def resolve_defenders(play: Play) -> list[str]:
    """
    Player ids credited on a defensive play.

    Tacklers if any are tagged, otherwise every listed participant.
    """
    tacklers = [p.player_id for p in play.participants_with_role(ParticipantRole.TACKLER)]
    if tacklers:
        return tacklers
    return [p.player_id for p in play.participants or ()]


def resolve_credits(
    play: Play,
    roles: Optional[Iterable[ParticipantRole]] = None,
) -> dict[ParticipantRole, list[str]]:
    """
    Resolve several roles at once, omitting roles with nobody credited.

    Defaults to every role.
    """
    credits = {}
    for role in roles if roles is not None else ParticipantRole:
        players = resolve_role(play, role)
        if players:
            credits[role] = players
    return credits
