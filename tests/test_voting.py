"""Tests for vote dedupe, the voting window and score updates."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from linkrank.models import VoteOutcome, VotingWindow

WEEK = 7 * 86400


def test_accepted_vote_adds_bonus_and_count(service) -> None:
    article_id = service.post_article("alice", "T", "L")

    assert service.vote("bob", article_id) is VoteOutcome.ACCEPTED

    assert service.get_article(article_id).votes == 2
    assert service.ranking.score(article_id) == 1864


def test_second_vote_is_ignored(service) -> None:
    article_id = service.post_article("alice", "T", "L")
    service.vote("bob", article_id)

    assert service.vote("bob", article_id) is VoteOutcome.ALREADY_VOTED
    assert service.get_article(article_id).votes == 2
    assert service.ranking.score(article_id) == 1864


def test_author_cannot_vote_on_own_article(service) -> None:
    article_id = service.post_article("alice", "T", "L")
    assert service.vote("alice", article_id) is VoteOutcome.ALREADY_VOTED
    assert service.get_article(article_id).votes == 1


def test_unknown_article_is_not_found(service) -> None:
    assert service.vote("x", "nonexistent-id") is VoteOutcome.NOT_FOUND


def test_votes_never_move_time_index(service) -> None:
    article_id = service.post_article("alice", "T", "L")
    service.vote("bob", article_id)
    service.vote("carol", article_id)
    assert service.ranking.created_at(article_id) == 1000


class TestVotingWindow:
    def test_open_at_window_boundary(self, service, clock) -> None:
        article_id = service.post_article("alice", "T", "L")
        clock.advance(WEEK)
        assert service.ledger.window_state(article_id) is VotingWindow.OPEN
        assert service.vote("bob", article_id) is VoteOutcome.ACCEPTED

    def test_closed_after_window(self, service, clock) -> None:
        article_id = service.post_article("alice", "T", "L")
        service.vote("bob", article_id)
        clock.advance(WEEK + 1)

        assert service.vote("carol", article_id) is VoteOutcome.WINDOW_CLOSED
        assert service.vote("bob", article_id) is VoteOutcome.WINDOW_CLOSED
        assert not service.ledger.has_voted(article_id, "carol")
        assert service.get_article(article_id).votes == 2

    def test_window_state_unknown_article(self, service) -> None:
        assert service.ledger.window_state("missing") is None

    def test_evaluate_is_one_way(self) -> None:
        states = [VotingWindow.evaluate(0, now, 10) for now in (0, 5, 10, 11, 500)]
        assert states == [VotingWindow.OPEN] * 3 + [VotingWindow.CLOSED] * 2


def test_revote_possible_after_voter_set_expires(service, conn) -> None:
    article_id = service.post_article("alice", "T", "L")
    service.vote("bob", article_id)
    # the voter set's TTL fired while the article is still inside its window
    conn.delete(f"voted:{article_id}")

    assert service.vote("bob", article_id) is VoteOutcome.ACCEPTED
    assert service.get_article(article_id).votes == 3


def test_concurrent_votes_accept_once(service) -> None:
    article_id = service.post_article("alice", "T", "L")

    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(lambda _: service.vote("bob", article_id), range(20)))

    assert outcomes.count(VoteOutcome.ACCEPTED) == 1
    assert outcomes.count(VoteOutcome.ALREADY_VOTED) == 19
    assert service.get_article(article_id).votes == 2


def test_empty_user_rejected(service) -> None:
    article_id = service.post_article("alice", "T", "L")
    with pytest.raises(ValueError):
        service.vote("", article_id)


def test_empty_article_id_rejected(service, conn) -> None:
    service.post_article("alice", "T", "L")
    with pytest.raises(ValueError):
        service.vote("bob", "")
    assert not conn.exists("voted:")
