# mypy: ignore-errors
# tests/services/test_score_adjustment.py
"""Tests for score arithmetic, vote-driven updates and ranking."""

from datetime import UTC, datetime

import pytest

from share_a_byte.core.errors import DependencyError, ErrorKind, RecordNotFoundError
from share_a_byte.models import ShareScore
from share_a_byte.services.share_scores import (
    adjust_score,
    apply_score_adjustment,
    get_score_for_user,
    leaderboard,
    recompute_ranks,
    update_score_from_vote,
)


@pytest.mark.parametrize(
    ("current", "delta", "expected"),
    [
        (5, -50, 0),
        (0, -10, 0),
        (40, 50, 90),
        (1000, 50, 1050),
        (1000, -10, 990),
        (None, 50, 50),
    ],
)
def test_adjust_score_clamps_at_zero(current, delta, expected) -> None:
    """Scores move by the delta but never below zero."""
    assert adjust_score(current, delta) == expected


def test_adjust_score_is_not_reversible() -> None:
    """Points lost to the floor are not recovered by the opposite delta."""
    assert adjust_score(adjust_score(5, -50), 50) == 50


def test_apply_score_adjustment_stamps_time_even_when_clamped() -> None:
    """last_updated is written even if the score does not change."""
    record = ShareScore(user_id="u", user_email="u@x.com", score=0)
    stamp = datetime(2026, 1, 2, tzinfo=UTC)

    new_score = apply_score_adjustment(record, -10, now=stamp)

    assert new_score == 0
    assert record.score == 0
    assert record.last_updated == stamp


def test_update_score_from_vote_commits(db_session, test_user) -> None:
    """The update handler persists the adjusted score."""
    record = get_score_for_user(db_session, test_user.id)

    updated = update_score_from_vote(db_session, record.id, 50)

    assert updated.score == 1050
    assert updated.last_updated is not None


def test_update_score_from_vote_unknown_record(db_session) -> None:
    """An unknown score id is a not-found validation error."""
    with pytest.raises(RecordNotFoundError) as excinfo:
        update_score_from_vote(db_session, "missing", 50)
    assert excinfo.value.kind is ErrorKind.VALIDATION


def test_get_score_for_user_without_record(db_session, admin_user) -> None:
    """A user with no score record is a dependency failure."""
    with pytest.raises(DependencyError):
        get_score_for_user(db_session, admin_user.id)


def test_recompute_ranks_is_dense(db_session, make_user) -> None:
    """Equal scores share a rank and the next score takes the following rank."""
    top = make_user("top@x.com", score=500)
    tied_a = make_user("tied-a@x.com", score=300)
    tied_b = make_user("tied-b@x.com", score=300)
    last = make_user("last@x.com", score=10)

    assert recompute_ranks(db_session) == 4

    ranks = {
        record.user_id: record.rank for record in db_session.query(ShareScore).all()
    }
    assert ranks[top.id] == 1
    assert ranks[tied_a.id] == ranks[tied_b.id] == 2
    assert ranks[last.id] == 3


def test_leaderboard_orders_by_score(db_session, make_user) -> None:
    """The leaderboard lists the highest score first."""
    make_user("low@x.com", score=5)
    high = make_user("high@x.com", score=900)

    rows = leaderboard(db_session, limit=10)

    assert rows[0][1].id == high.id
    assert [record.score for record, _ in rows] == [900, 5]
