"""Unit tests for season totals and leaderboard selection."""

import math

import pytest

from courtstats.aggregator import (
    aggregate,
    average_scores,
    game_result,
    leaderboard_leader,
    rank_players,
    season_record,
    team_shooting,
)
from courtstats.models import Totals
from factories import make_game, make_line


class TestAggregate:
    """Tests for folding stat lines into totals."""

    def test_two_game_scenario(self, g1, g2):
        """A's totals across G1 and G2 sum every field and FG% = 12/25."""
        totals = aggregate(['A'], [g1, g2])
        a = totals['A']
        assert a.g == 2
        assert a.pts == 30
        assert a.reb == 7
        assert a.ast == 4
        assert a.stl == 1
        assert a.blk == 1
        assert a.fgm == 12
        assert a.fga == 25
        assert a.tpm == 2
        assert a.tpa == 8
        assert a.fgp == pytest.approx(0.48)
        assert a.tpp == pytest.approx(0.25)

    def test_games_played_counts_only_games_with_a_line(self, g1, g2):
        """A player missing from a game does not get credit for it."""
        totals = aggregate(['A', 'B'], [g1, g2])
        assert totals['A'].g == 2
        assert totals['B'].g == 0
        assert totals['B'].pts == 0

    def test_games_played_property(self, season):
        """g equals the number of games where the player has a stat line."""
        totals = aggregate(season.players, season.games)
        for player in season.players:
            expected = sum(1 for g in season.games if player in g.players)
            assert totals[player].g == expected

    def test_idempotent(self, season):
        """Aggregating the same inputs twice gives equal results."""
        first = aggregate(season.players, season.games)
        second = aggregate(season.players, season.games)
        assert first == second
        assert first is not second

    def test_order_of_games_does_not_change_totals(self, g1, g2):
        assert aggregate(['A'], [g1, g2]) == aggregate(['A'], [g2, g1])

    def test_zero_attempts_is_undefined_not_zero(self):
        """FG% with no attempts is NaN."""
        games = [make_game(1, {'A': make_line(pts=2, fgm=0, fga=0)})]
        totals = aggregate(['A'], games)
        assert math.isnan(totals['A'].fgp)
        assert math.isnan(totals['A'].tpp)

    def test_player_order_preserved(self, season):
        totals = aggregate(['C', 'A', 'B'], season.games)
        assert list(totals) == ['C', 'A', 'B']

    def test_empty_season(self):
        totals = aggregate(['A'], [])
        assert totals['A'] == Totals()
        assert totals['A'].per_game('pts') == 0


class TestLeaderboard:
    """Tests for leaderboard_leader and rank_players."""

    def test_points_leader(self, season):
        totals = aggregate(season.players, season.games)
        assert leaderboard_leader(totals, 'pts') == ('A', 42)

    def test_empty_totals(self):
        assert leaderboard_leader({}, 'pts') == (None, None)

    def test_fgp_skips_player_without_attempts(self):
        """A high scorer with zero FGA never leads FG%."""
        games = [
            make_game(1, {
                'Scorer': make_line(pts=30, fgm=0, fga=0),
                'Shooter': make_line(pts=2, fgm=1, fga=4),
            }),
        ]
        totals = aggregate(['Scorer', 'Shooter'], games)
        leader, value = leaderboard_leader(totals, 'fgp')
        assert leader == 'Shooter'
        assert value == pytest.approx(0.25)

    def test_ties_keep_first_player(self):
        """Equal values resolve to the earliest player in the list."""
        games = [make_game(1, {'X': make_line(reb=7), 'Y': make_line(reb=7)})]
        assert leaderboard_leader(aggregate(['X', 'Y'], games), 'reb')[0] == 'X'
        assert leaderboard_leader(aggregate(['Y', 'X'], games), 'reb')[0] == 'Y'

    def test_all_undefined_returns_nan_value(self):
        games = [make_game(1, {'X': make_line(), 'Y': make_line()})]
        leader, value = leaderboard_leader(aggregate(['X', 'Y'], games), 'tpp')
        assert leader == 'X'
        assert math.isnan(value)

    def test_unknown_metric(self, season):
        totals = aggregate(season.players, season.games)
        with pytest.raises(ValueError, match='Unknown metric'):
            leaderboard_leader(totals, 'fouls')

    def test_rank_players_puts_undefined_last(self):
        games = [
            make_game(1, {
                'X': make_line(),
                'Y': make_line(fgm=1, fga=2),
                'Z': make_line(fgm=3, fga=4),
            }),
        ]
        ranked = rank_players(aggregate(['X', 'Y', 'Z'], games), 'fgp')
        assert [p for p, _ in ranked] == ['Z', 'Y', 'X']


class TestGameSummaries:
    """Tests for game-level helpers."""

    def test_game_result(self):
        assert game_result(make_game(1, {}, team_score=80, opponent_score=70)) == 'W'
        assert game_result(make_game(1, {}, team_score=60, opponent_score=70)) == 'L'
        assert game_result(make_game(1, {}, team_score=70, opponent_score=70)) == 'T'

    def test_season_record_counts_ties_as_losses(self, season):
        assert season_record(season.games) == (1, 2)

    def test_average_scores(self, season):
        avg_for, avg_against = average_scores(season.games)
        assert avg_for == pytest.approx(265 / 3)
        assert avg_against == pytest.approx(258 / 3)

    def test_average_scores_empty(self):
        assert average_scores([]) == (0.0, 0.0)

    def test_team_shooting_skips_absent_players(self, season):
        game = season.game(1)
        shooting = team_shooting(game, season.players)
        assert (shooting.fgm, shooting.fga) == (11, 19)
        assert (shooting.tpm, shooting.tpa) == (2, 6)
