"""Print the standings of the latest Grand Prix, straight from OpenF1."""

from race_analytics import (
    RaceResultsService,
    format_lap_time,
    format_position,
    format_position_change,
    get_repository,
    get_settings,
)
from race_analytics.services import recent_race_sessions


def main() -> None:
    settings = get_settings()
    repo = get_repository(cached=False)

    sessions = repo.get_sessions_between(settings.last_season - 1, settings.last_season, "Race")
    latest = recent_race_sessions(sessions, limit=1)
    if not latest:
        print("No race sessions found.")
        return

    race = RaceResultsService(repo).build_standings(latest[0]["session_key"])
    print(f"=== {race.race_name} ===")
    for s in race.standings:
        marker = " *" if s.has_fastest_lap else ""
        print(
            f"  {format_position(s.position):>4}  {s.name_acronym:<4} {s.team_name:<24}"
            f" {format_position_change(s.position_delta):>3}  stops {s.pit_stops}"
            f"  best {format_lap_time(s.best_lap_time)}{marker}"
        )


if __name__ == "__main__":
    main()
