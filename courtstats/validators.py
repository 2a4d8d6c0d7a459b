"""Validation functions for season data loaded at the file boundary."""

from .models import Game, StatLine


def validate_stat_line(player: str, game_id: int, line: StatLine) -> tuple[list[str], list[str]]:
    """
    Check that one stat line is internally consistent.

    Errors (reject the file):
    - Makes exceed attempts (fgm > fga, tpm > tpa)
    - Negative counting stats

    Warnings (report only):
    - More three-pointers made than field goals made
    - Points lower than the field goals alone account for

    Returns:
        Tuple of (errors, warnings)
    """
    errors: list[str] = []
    warnings: list[str] = []
    where = f'{player} in game {game_id}'

    for stat, value in vars(line).items():
        if value < 0:
            errors.append(f'{where} has negative {stat} ({value})')

    if line.fgm > line.fga:
        errors.append(f'{where} has fgm ({line.fgm}) > fga ({line.fga})')
    if line.tpm > line.tpa:
        errors.append(f'{where} has tpm ({line.tpm}) > tpa ({line.tpa})')

    if line.tpm > line.fgm:
        warnings.append(f'{where} has more 3PM ({line.tpm}) than FGM ({line.fgm})')

    min_points = 2 * line.fgm + line.tpm
    if line.pts < min_points:
        warnings.append(
            f'{where} scored {line.pts} pts but made shots account for at least {min_points}'
        )

    return errors, warnings


def validate_game(game: Game, players: list[str]) -> tuple[list[str], list[str]]:
    """
    Validate one game against the season's player list.

    Unknown players are reported as warnings; their lines are never read
    because every computation walks the season's player list.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if game.team_score < 0 or game.opponent_score < 0:
        errors.append(f'Game {game.id} has a negative score ({game.team_score}-{game.opponent_score})')

    known = set(players)
    for name, line in game.players.items():
        if name not in known:
            warnings.append(f'Game {game.id} has a stat line for unknown player {name}')
        line_errors, line_warnings = validate_stat_line(name, game.id, line)
        errors.extend(line_errors)
        warnings.extend(line_warnings)

    tracked_points = sum(line.pts for name, line in game.players.items() if name in known)
    if tracked_points > game.team_score:
        warnings.append(
            f'Game {game.id} tracked players scored {tracked_points} pts '
            f'but the team only scored {game.team_score}'
        )

    return errors, warnings


def validate_season(players: list[str], games: list[Game]) -> tuple[list[str], list[str]]:
    """
    Validate a whole season.

    Args:
        players: Season player list
        games: Games in any order

    Returns:
        Tuple of (errors, warnings)
        - errors: Invariant violations that must stop loading
        - warnings: Issues to review but not block loading
    """
    errors: list[str] = []
    warnings: list[str] = []

    seen = set()
    duplicates = set()
    for game in games:
        if game.id in seen:
            duplicates.add(game.id)
        seen.add(game.id)

    if duplicates:
        errors.append(f'Duplicate game ids: {", ".join(str(i) for i in sorted(duplicates))}')

    for game in games:
        game_errors, game_warnings = validate_game(game, players)
        errors.extend(game_errors)
        warnings.extend(game_warnings)

    return errors, warnings
