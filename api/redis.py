from redis.asyncio import Redis

from api.settings import settings


auth_redis: Redis = Redis.from_url(settings.auth_redis_url, decode_responses=True)
