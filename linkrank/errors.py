'''Exceptions raised by the ranking core.

Expected voting results (already voted, window closed, unknown article) are
reported as ``VoteOutcome`` values, not raised.
'''

from redis.exceptions import RedisError

# Store failures propagate untouched; exported so callers need not import redis.
StoreUnavailableError = RedisError


class LinkRankError(Exception):
    '''Base exception for the ranking core.'''


class ArticleNotFoundError(LinkRankError):
    '''Raised when an article id has no backing record.'''

    def __init__(self, article_id: str) -> None:
        self.article_id = article_id
        super().__init__(f"Article not found: {article_id}")
