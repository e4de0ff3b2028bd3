'''Article records: id allocation and the article:<id> hashes.'''

import time

from linkrank import keys
from linkrank.errors import ArticleNotFoundError
from linkrank.models import Article
from linkrank.observability import get_logger

logger = get_logger("catalog")


class ArticleCatalog:
    '''Creates and reads articles.

    Writes accept an optional pipeline so the caller can bundle the new
    record with its index entries in one transaction.
    '''

    def __init__(self, conn, clock=time.time):
        self.conn = conn
        self.clock = clock

    def allocate_id(self) -> str:
        # INCR is atomic, so ids are unique and strictly increasing
        return str(self.conn.incr(keys.ARTICLE_COUNTER))

    def post_article(self, author: str, title: str, link: str, pipe=None) -> Article:
        '''Allocate an id and store the article with its own vote counted.'''
        if not author:
            raise ValueError("author must not be empty")
        article = Article(
            id=self.allocate_id(),
            title=title,
            link=link,
            author=author,
            created_at=self.clock(),
            votes=1,
        )
        (pipe or self.conn).hset(article.reference, mapping=article.to_hash())
        return article

    def record_vote(self, article_id: str, pipe=None) -> None:
        (pipe or self.conn).hincrby(keys.article_key(article_id), 'votes', 1)

    def exists(self, article_id: str) -> bool:
        return bool(self.conn.exists(keys.article_key(article_id)))

    def get_article(self, article_id: str) -> Article:
        data = self.conn.hgetall(keys.article_key(article_id))
        if not data:
            raise ArticleNotFoundError(article_id)
        return Article.from_hash(article_id, data)

    def fetch_many(self, references: list[str]) -> list[Article]:
        '''Load the hashes behind index members, keeping their order.'''
        if not references:
            return []
        pipe = self.conn.pipeline(transaction=False)
        for reference in references:
            pipe.hgetall(reference)
        articles = []
        for reference, data in zip(references, pipe.execute()):
            if not data:
                logger.warning("dangling_index_entry", reference=reference)
                continue
            articles.append(Article.from_hash(keys.article_id_of(reference), data))
        return articles
