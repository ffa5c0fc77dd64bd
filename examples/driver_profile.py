"""Season-by-season summary for one driver, e.g. ``python driver_profile.py norris``."""

import sys

from race_analytics import (
    DriverSearchService,
    DriverStatsService,
    format_average_position,
    format_position,
    get_repository,
    get_settings,
)
from race_analytics.services import recent_race_sessions


def main(query: str) -> None:
    settings = get_settings()
    repo = get_repository(cached=False)

    sessions = recent_race_sessions(
        repo.get_sessions_between(settings.first_season, settings.last_season, "Race"),
    )
    match = DriverSearchService(repo, settings.search_lookback).find_driver(query, sessions)
    print(f"Found {match.driver['full_name']} in {match.session['country_name']}")

    profile = DriverStatsService(repo).build_profile(
        match.driver,
        sessions,
        on_progress=lambda i, total, name: print(f"  [{i}/{total}] {name}"),
    )

    for year in profile.years:
        stats = profile.seasons[year]
        print(
            f"{year}: {stats.total_races} races, {stats.points} pts, {stats.podiums} podiums,"
            f" best {format_position(stats.best_position)},"
            f" avg {format_average_position(stats.average_position)}"
        )
    print(f"Career: {profile.career.points} pts over {profile.career.total_races} races")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "Verstappen")
