'''Redis connection factory.

The client is created by the caller and handed to each component; nothing in
the package keeps a module-level connection.
'''

import redis

from linkrank.observability import get_logger
from linkrank.settings import RankingSettings

logger = get_logger("store")


def connect(settings: RankingSettings) -> redis.Redis:
    '''Create a Redis client for ``settings.redis_url`` and check it answers.'''
    conn = redis.Redis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=settings.socket_timeout_seconds,
        socket_timeout=settings.socket_timeout_seconds,
    )
    conn.ping()
    logger.info("redis_connected", url=_redacted(settings.redis_url))
    return conn


def _redacted(url: str) -> str:
    # drop credentials before logging
    scheme, sep, rest = url.partition("://")
    if "@" in rest:
        rest = rest.rsplit("@", 1)[1]
    return scheme + sep + rest
