"""Play-by-play event pipeline entry point."""

import argparse
import traceback

from .diagnostics import log_error
from .errors import PlayByPlayError
from .game import parse_game
from .load import game_teams, load_playbyplay, records_from_frame, split_games
from .periods import schedule_for_league
from .transform import events_to_frame, transform_game, transform_game_summary
from .write import write_events_csv, write_game_data, write_index


def main(
    input_path: str,
    league: str = "WNBA",
    data_dir: str = "data",
    source: str | None = None,
    export_csv: bool = False,
) -> int:
    """
    Parse every game in a play-by-play CSV and write its events.

    Args:
        input_path: CSV of raw play rows (see load.REQUIRED_COLUMNS)
        league: League whose period schedule applies (default "WNBA")
        data_dir: Base data directory (default "data")
        source: Source identifier for error messages (defaults to input_path)
        export_csv: Also write each game's attribute sets as events.csv

    Returns:
        Number of games written
    """
    source = source or input_path
    print(f"Running pipeline for {source}")

    # 1. Resolve the league schedule once for the whole run
    try:
        schedule = schedule_for_league(league)
    except PlayByPlayError as e:
        log_error(str(e))
        return 0

    # 2. Load raw rows
    print(f"Loading play-by-play from {input_path}...")
    df = load_playbyplay(input_path)
    if df is None or df.empty:
        print(f"No play-by-play rows in {input_path}")
        return 0

    games = split_games(df)
    print(f"Found {len(games)} games")

    # 3. Parse, transform and write each game
    skipped_games = 0
    successful_games = 0
    summaries = []

    for game_id, rows in games:
        print(f"Processing game {game_id}...")
        home_team, away_team = game_teams(rows)

        try:
            records = records_from_frame(game_id, rows)
            game = parse_game(
                game_id, records, schedule,
                home_team=home_team, away_team=away_team, source=source,
            )
        except PlayByPlayError as e:
            log_error(f"Skipping game {game_id}: {e}")
            skipped_games += 1
            continue

        try:
            write_game_data(
                game_id,
                transform_game(game),
                [d._asdict() for d in game.diagnostics],
                game.text_file_contents(),
                data_dir,
            )
            if export_csv:
                write_events_csv(game_id, events_to_frame(game.events), data_dir)
        except OSError as e:
            log_error(f"Error writing game {game_id}: {e}")
            traceback.print_exc()
            skipped_games += 1
            continue

        print(f"Wrote {len(game.events)} events for {game_id} ({len(game.diagnostics)} diagnostics)")
        summaries.append(transform_game_summary(game))
        successful_games += 1

    # 4. Only update the index if any games succeeded
    if summaries:
        print("Updating index...")
        write_index(summaries, data_dir)

    print(f"Pipeline complete for {source}. Processed {successful_games} games. Skipped {skipped_games} games due to errors.")
    return successful_games


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play-by-play event pipeline")
    parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="Play-by-play CSV with game_id, period, clock, team, description, score columns",
    )
    parser.add_argument(
        "--league",
        type=str,
        default="WNBA",
        help="League period schedule: WNBA, NBA, NCAAW or NCAAM (default: WNBA)",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default="data",
        help="Base data directory (default: data)",
    )
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Source identifier used in error messages (default: input path)",
    )
    parser.add_argument(
        "--csv",
        action="store_true",
        help="Also write games/<gameId>/events.csv with one row per event",
    )

    args = parser.parse_args()
    main(args.input, league=args.league, data_dir=args.data_dir, source=args.source, export_csv=args.csv)
