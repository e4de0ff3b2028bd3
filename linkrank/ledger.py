'''Per-article voter sets and the voting window.'''

import time

from linkrank import keys
from linkrank.models import VoteOutcome, VotingWindow
from linkrank.observability import get_logger

logger = get_logger("ledger")


class VoteLedger:
    '''Decides whether a vote counts.

    A vote counts at most once per user and article, and only while the
    article is younger than the voting window. The ledger never touches
    scores or vote counts; the service applies those for accepted votes.

    voted:<id> expires together with the voting window. The TTL is set when
    the article is posted and is not refreshed by votes, so once Redis drops
    the set the window check alone guards the article. Should the set expire
    before the window check closes the article, a user who already voted can
    vote again.
    '''

    def __init__(self, conn, ranking, settings, clock=time.time):
        self.conn = conn
        self.ranking = ranking
        self.settings = settings
        self.clock = clock

    def open_ballot(self, article_id: str, author: str, pipe=None) -> None:
        '''The poster's own submission counts as their vote.'''
        conn = pipe or self.conn
        voted = keys.voted_key(article_id)
        conn.sadd(voted, author)
        conn.expire(voted, self.settings.voting_window_seconds)

    def window_state(self, article_id: str) -> VotingWindow | None:
        created_at = self.ranking.created_at(article_id)
        if created_at is None:
            return None
        return VotingWindow.evaluate(created_at, self.clock(), self.settings.voting_window_seconds)

    def has_voted(self, article_id: str, user: str) -> bool:
        return bool(self.conn.sismember(keys.voted_key(article_id), user))

    def register_vote(self, user: str, article_id: str) -> VoteOutcome:
        if not user:
            raise ValueError("user must not be empty")
        state = self.window_state(article_id)
        if state is None:
            logger.debug("vote_rejected", article_id=article_id, user=user, reason="not_found")
            return VoteOutcome.NOT_FOUND
        if state is VotingWindow.CLOSED:
            logger.debug("vote_rejected", article_id=article_id, user=user, reason="window_closed")
            return VoteOutcome.WINDOW_CLOSED

        # SADD answers 1 only for the first insert, even under concurrent votes
        if not self.conn.sadd(keys.voted_key(article_id), user):
            logger.debug("vote_rejected", article_id=article_id, user=user, reason="already_voted")
            return VoteOutcome.ALREADY_VOTED
        return VoteOutcome.ACCEPTED
