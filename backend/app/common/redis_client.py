# app/common/redis_client.py
import redis
from django.conf import settings


_redis = None


def _connect() -> redis.Redis:
    timeout = settings.REDIS_TIMEOUT_SECONDS
    # 발송 제한 카운터 전용. 죽어 있으면 호출자가 RedisError 를 받는다
    if settings.REDIS_URL:
        return redis.Redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=timeout,
            socket_timeout=timeout,
        )
    return redis.Redis(
        host=settings.REDIS_HOST,
        port=settings.REDIS_PORT,
        db=settings.REDIS_DB,
        decode_responses=True,
        socket_connect_timeout=timeout,
        socket_timeout=timeout,
    )


def get_redis() -> redis.Redis:
    global _redis
    if _redis is None:
        _redis = _connect()
    return _redis


def reset_redis():
    global _redis
    _redis = None
