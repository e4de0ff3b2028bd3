'''Typed records and outcome values.

Articles live in Redis as flat string hashes; conversion happens only in
``Article.to_hash`` / ``Article.from_hash``.
'''

from dataclasses import dataclass
from enum import Enum

from linkrank import keys


class Order(Enum):
    '''Ranking order, valued by the sorted set that backs it.'''

    SCORE = keys.SCORE_INDEX
    TIME = keys.TIME_INDEX

    @property
    def index_key(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: "str | Order") -> "Order":
        '''Accept an Order, 'score'/'time', or the raw key 'score:'/'time:'.'''
        if isinstance(name, cls):
            return name
        normalized = str(name).strip().lower().rstrip(':')
        for order in cls:
            if order.name.lower() == normalized:
                return order
        raise ValueError(f"Unknown order: {name!r}")


class VoteOutcome(Enum):
    ACCEPTED = "accepted"
    ALREADY_VOTED = "already_voted"
    WINDOW_CLOSED = "window_closed"
    NOT_FOUND = "not_found"

    @property
    def accepted(self) -> bool:
        return self is VoteOutcome.ACCEPTED


class VotingWindow(Enum):
    '''Eligibility of an article for votes.

    OPEN -> CLOSED is one-way: it is derived from the creation time on every
    check and nothing ever moves an article back.
    '''

    OPEN = "open"
    CLOSED = "closed"

    @classmethod
    def evaluate(cls, created_at: float, now: float, window_seconds: int) -> "VotingWindow":
        if created_at < now - window_seconds:
            return cls.CLOSED
        return cls.OPEN


@dataclass(frozen=True)
class Article:
    id: str
    title: str
    link: str
    author: str
    created_at: float
    votes: int

    @property
    def reference(self) -> str:
        return keys.article_key(self.id)

    def to_hash(self) -> dict[str, str]:
        return {
            'title': self.title,
            'link': self.link,
            'poster': self.author,
            'time': str(self.created_at),
            'votes': str(self.votes),
        }

    @classmethod
    def from_hash(cls, article_id: str, data: dict[str, str]) -> "Article":
        return cls(
            id=article_id,
            title=data.get('title', ''),
            link=data.get('link', ''),
            author=data.get('poster', ''),
            created_at=float(data['time']),
            votes=int(data['votes']),
        )
