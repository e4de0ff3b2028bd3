'''Ranking configuration loaded from the environment (``LINKRANK_*``).'''

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ONE_WEEK_IN_SECONDS = 7 * 86400
# 86400 seconds a day / 200 votes needed to stay on the front page for a day
VOTE_SCORE = 432
ARTICLES_PER_PAGE = 25
GROUP_CACHE_TTL = 60


class RankingSettings(BaseSettings):
    '''Store location plus the constants of the voting protocol.'''

    model_config = SettingsConfigDict(
        env_prefix="LINKRANK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    redis_url: str = "redis://localhost:6379/0"
    socket_timeout_seconds: float = Field(default=5, gt=0)

    voting_window_seconds: int = Field(default=ONE_WEEK_IN_SECONDS, ge=1)
    vote_bonus: float = Field(default=VOTE_SCORE, gt=0)
    page_size: int = Field(default=ARTICLES_PER_PAGE, ge=1)
    group_cache_ttl_seconds: int = Field(default=GROUP_CACHE_TTL, ge=1)


@lru_cache
def get_settings() -> RankingSettings:
    '''Get cached settings instance.'''
    return RankingSettings()
