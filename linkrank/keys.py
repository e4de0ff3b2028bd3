'''
Redis key scheme.

 article:           string   id counter
 article:<id>       hash     title / link / poster / time / votes
 voted:<id>         set      users who voted, expires with the voting window
 score:             zset     article:<id> -> time + bonus * votes
 time:              zset     article:<id> -> time
 group:<name>       set      article:<id>
 score:<name>       zset     cached intersection of group:<name> and score:
 time:<name>        zset     cached intersection of group:<name> and time:
'''

ARTICLE_COUNTER = 'article:'
ARTICLE_PREFIX = 'article:'
VOTED_PREFIX = 'voted:'
GROUP_PREFIX = 'group:'
SCORE_INDEX = 'score:'
TIME_INDEX = 'time:'


def article_key(article_id):
    # 'article:' alone is the id counter
    if not article_id:
        raise ValueError('article id must not be empty')
    return ARTICLE_PREFIX + article_id


def article_id_of(reference):
    '''article:7 -> 7'''
    return reference.partition(':')[-1]


def voted_key(article_id):
    if not article_id:
        raise ValueError('article id must not be empty')
    return VOTED_PREFIX + article_id


def group_key(group):
    return GROUP_PREFIX + group


def group_cache_key(group, index_key):
    # one cached zset per group and per ordering
    return index_key + group
