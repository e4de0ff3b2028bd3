'''
Link-sharing ranking on top of Redis: posting, windowed voting, ranked
listings and cached group views.
'''
from linkrank.errors import ArticleNotFoundError, LinkRankError, StoreUnavailableError
from linkrank.models import Article, Order, VoteOutcome, VotingWindow
from linkrank.service import LinkRankService
from linkrank.settings import RankingSettings, get_settings

__all__ = [
    "Article",
    "ArticleNotFoundError",
    "LinkRankError",
    "LinkRankService",
    "Order",
    "RankingSettings",
    "StoreUnavailableError",
    "VoteOutcome",
    "VotingWindow",
    "get_settings",
]
