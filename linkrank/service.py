'''Public operations: post, vote, list, group and list by group.'''

import time

from linkrank.catalog import ArticleCatalog
from linkrank.errors import ArticleNotFoundError
from linkrank.groups import GroupIndex
from linkrank.ledger import VoteLedger
from linkrank.models import Article, Order, VoteOutcome
from linkrank.observability import get_logger
from linkrank.ranking import RankingIndex
from linkrank.settings import RankingSettings, get_settings

logger = get_logger("service")


class LinkRankService:
    '''Sequences the catalog, ledger, ranking and group components.

    Every call goes straight to Redis; nothing is held in memory between
    calls, so any number of service instances may share one database.

    Args:
        conn: Redis client created with ``decode_responses=True``.
        settings: Protocol constants, defaults to ``get_settings()``.
        clock: Returns the current unix time.
    '''

    def __init__(self, conn, settings: RankingSettings | None = None, clock=time.time):
        self.conn = conn
        self.settings = settings or get_settings()
        self.catalog = ArticleCatalog(conn, clock)
        self.ranking = RankingIndex(conn, self.catalog, self.settings)
        self.ledger = VoteLedger(conn, self.ranking, self.settings, clock)
        self.groups = GroupIndex(conn, self.settings)

    def post_article(self, author: str, title: str, link: str) -> str:
        '''Publish an article and return its id.

        Not idempotent: retrying after a store failure may create a second
        article.
        '''
        pipe = self.conn.pipeline(transaction=True)
        article = self.catalog.post_article(author, title, link, pipe)
        self.ledger.open_ballot(article.id, author, pipe)
        self.ranking.seed(article, pipe)
        pipe.execute()
        logger.info("article_posted", article_id=article.id, author=author)
        return article.id

    def vote(self, user: str, article_id: str) -> VoteOutcome:
        outcome = self.ledger.register_vote(user, article_id)
        if outcome.accepted:
            pipe = self.conn.pipeline(transaction=True)
            self.catalog.record_vote(article_id, pipe)
            self.ranking.apply_vote(article_id, self.settings.vote_bonus, pipe)
            pipe.execute()
            logger.info("vote_accepted", article_id=article_id, user=user)
        return outcome

    def get_article(self, article_id: str) -> Article:
        return self.catalog.get_article(article_id)

    def list_articles(self, page: int = 1, order: Order | str = Order.SCORE) -> list[Article]:
        references = self.ranking.page(Order.parse(order), page)
        return self.ranking.hydrate(references)

    def add_to_groups(self, article_id: str, groups) -> None:
        if isinstance(groups, str):
            groups = [groups]
        if not self.catalog.exists(article_id):
            raise ArticleNotFoundError(article_id)
        self.groups.add_to_groups(article_id, groups)

    def list_group_articles(self, group: str, page: int = 1, order: Order | str = Order.SCORE) -> list[Article]:
        references = self.groups.ranked_members(group, Order.parse(order), page)
        return self.ranking.hydrate(references)
