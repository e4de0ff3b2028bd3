'''Score and time indices (the score: and time: sorted sets).'''

from linkrank import keys
from linkrank.models import Article, Order


def page_bounds(page: int, page_size: int) -> tuple[int, int]:
    '''Inclusive ZREVRANGE bounds for a 1-based page.'''
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    start = (page - 1) * page_size
    return start, start + page_size - 1


class RankingIndex:
    '''Two descending views over the same article references.

    score = posting time + vote bonus * votes; time = posting time and never
    changes after the article is seeded.
    '''

    def __init__(self, conn, catalog, settings):
        self.conn = conn
        self.catalog = catalog
        self.settings = settings

    def seed(self, article: Article, pipe=None) -> None:
        conn = pipe or self.conn
        conn.zadd(keys.SCORE_INDEX, {article.reference: article.created_at + self.settings.vote_bonus})
        conn.zadd(keys.TIME_INDEX, {article.reference: article.created_at})

    def apply_vote(self, article_id: str, score_delta: float | None = None, pipe=None) -> None:
        if score_delta is None:
            score_delta = self.settings.vote_bonus
        (pipe or self.conn).zincrby(keys.SCORE_INDEX, score_delta, keys.article_key(article_id))

    def score(self, article_id: str) -> float | None:
        return self.conn.zscore(keys.SCORE_INDEX, keys.article_key(article_id))

    def created_at(self, article_id: str) -> float | None:
        '''Posting time from the time index, None when the article is unknown.'''
        return self.conn.zscore(keys.TIME_INDEX, keys.article_key(article_id))

    def page(self, order: Order, page: int) -> list[str]:
        '''One page of references, highest first.

        Pages past the end come back empty.
        '''
        start, end = page_bounds(page, self.settings.page_size)
        return self.conn.zrevrange(order.index_key, start, end)

    def hydrate(self, references: list[str]) -> list[Article]:
        return self.catalog.fetch_many(references)
