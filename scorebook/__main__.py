"""Entry point for scorebook package."""

import argparse
import logging

from scorebook.config import get_config


def _demo_game():
    """A short scored game used by --demo."""
    from scorebook.core.enums import ParticipantRole, PlayType, TeamSide
    from scorebook.core.models import Game, Play, PlayParticipant, Player, RosterSnapshot
    from scorebook.game.recalc import add_play

    roster = RosterSnapshot(
        team_id="demo",
        roster=(
            Player(id="qb1", name="Sam Carter", jersey_number=7, position="QB"),
            Player(id="rb1", name="Eli Brooks", jersey_number=22, position="RB"),
            Player(id="wr1", name="Nate Ford", jersey_number=11, position="WR"),
            Player(id="lb1", name="Owen Price", jersey_number=44, position="LB"),
            Player(id="k1", name="Max Lee", jersey_number=3, position="K"),
        ),
    )
    game = Game(my_team_id="demo", opponent_name="Visitors", my_team_snapshot=roster)

    def passed(play_type, yards, **kwargs):
        return Play.create(
            play_type,
            yards=yards,
            participants=(
                PlayParticipant("qb1", ParticipantRole.PASSER),
                PlayParticipant("wr1", ParticipantRole.RECEIVER),
            ),
            **kwargs,
        )

    plays = [
        Play.create(PlayType.KICKOFF, yards=55, team_side=TeamSide.AWAY),
        Play.create(PlayType.RUSH, yards=7, player_id="rb1"),
        passed(PlayType.PASS_COMPLETE, 18),
        Play.create(PlayType.RUSH, yards=-2, player_id="rb1"),
        passed(PlayType.PASS_TD, 23),
        Play.create(PlayType.EXTRA_POINT_KICK_MADE, player_id="k1"),
        Play.create(PlayType.RUSH, yards=4, team_side=TeamSide.AWAY),
        Play.create(
            PlayType.TACKLE,
            yards=4,
            team_side=TeamSide.AWAY,
            participants=(PlayParticipant("lb1", ParticipantRole.TACKLER),),
        ),
        Play.create(PlayType.FIELD_GOAL_MADE, yards=31, team_side=TeamSide.AWAY),
    ]
    for play in plays:
        game = add_play(game, play)
    return game


def _print_box_score(game) -> None:
    home = game.home_stats
    print(f"Final: {game.score_display}")
    print()
    print(f"Passing:   {home.completions}/{home.passing_attempts} {home.passing_yards} yds "
          f"{home.passing_tds} TD  rating {home.qb_rating}")
    print(f"Rushing:   {home.rushing_attempts} att {home.rushing_yards} yds")
    print(f"Receiving: {home.receptions} rec {home.receiving_yards} yds")
    print(f"Defense:   {home.tackles} tackles")
    print()
    for player in game.my_team_snapshot.roster:
        credited = {k: v for k, v in player.stats.items() if v}
        print(f"{player.display_name:<20} {credited}")


def main() -> None:
    """Main entry point for the Scorebook application."""
    parser = argparse.ArgumentParser(
        description="Scorebook - live football scoring",
        prog="scorebook",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Score a sample game and print the box score (no server)",
    )
    parser.add_argument("--host", type=str, default=None, help="API host (default: from config)")
    parser.add_argument("--port", type=int, default=None, help="API port (default: from config)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args = parser.parse_args()

    config = get_config()
    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.demo:
        print("Scorebook (Demo Mode)")
        print("=" * 50)
        _print_box_score(_demo_game())
    else:
        from scorebook.api.main import run_api

        run_api(
            host=args.host or config.host,
            port=args.port or config.port,
            reload=args.reload,
        )


if __name__ == "__main__":
    main()
