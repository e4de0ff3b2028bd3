'''Groups of articles and their cached rankings.'''

from linkrank import keys
from linkrank.models import Order
from linkrank.observability import get_logger
from linkrank.ranking import page_bounds

logger = get_logger("groups")


class GroupIndex:
    def __init__(self, conn, settings):
        self.conn = conn
        self.settings = settings

    def add_to_groups(self, article_id: str, groups) -> None:
        '''Add the article to every named group; re-adding is a no-op.'''
        article = keys.article_key(article_id)
        for group in groups:
            if self.conn.sadd(keys.group_key(group), article):
                logger.info("group_member_added", group=group, article_id=article_id)

    def members(self, group: str) -> set[str]:
        return self.conn.smembers(keys.group_key(group))

    def ranked_members(self, group: str, order: Order, page: int) -> list[str]:
        '''A page of the group's articles in the given order.

        The ranking is the intersection of the group with the order's index,
        cached for group_cache_ttl_seconds and rebuilt by whichever reader
        finds it missing. Concurrent rebuilds compute the same set, so they
        are left to overlap.
        '''
        key = keys.group_cache_key(group, order.index_key)
        start, end = page_bounds(page, self.settings.page_size)
        pipe = self.conn.pipeline(transaction=True)
        pipe.exists(key)
        pipe.zrevrange(key, start, end)
        cached, references = pipe.execute()
        if cached:
            return references
        _, references = self.rebuild(group, order, start, end)
        return references

    def rebuild(self, group: str, order: Order, start: int = 0, end: int = -1) -> tuple[int, list[str]]:
        '''Recompute the cached ranking and read [start, end] from it.

        Store, expiry and read run in one MULTI so the cache never exists
        without its TTL.
        '''
        key = keys.group_cache_key(group, order.index_key)
        pipe = self.conn.pipeline(transaction=True)
        # group members carry score 1 in the intersection, MAX keeps the index score
        pipe.zinterstore(key, [keys.group_key(group), order.index_key], aggregate='MAX')
        pipe.expire(key, self.settings.group_cache_ttl_seconds)
        pipe.zrevrange(key, start, end)
        size, _, references = pipe.execute()
        logger.info("group_cache_rebuilt", group=group, order=order.name.lower(), size=size)
        return size, references
