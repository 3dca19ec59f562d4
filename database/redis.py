from redis.asyncio import Redis
from functools import wraps
import json
from typing import Optional, Any

from utility.config import settings
from utility.logger import logger

class RedisConfig:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, 'initialized'):
            self.REDIS_URL = settings.REDIS_URL
            self.client = None
            self.initialized = False

    async def initialize(self):
        if not self.initialized:
            try:
                self.client = Redis.from_url(
                    self.REDIS_URL,
                    encoding="utf-8",
                    decode_responses=True
                )
                await self.client.ping()
                self.initialized = True
            except Exception as e:
                self.client = None
                raise Exception(f"Failed to initialize Redis: {str(e)}")
        return self

    async def close(self):
        if self.client:
            await self.client.close()
            self.client = None
            self.initialized = False

    async def get(self, key: str) -> Optional[Any]:
        if not self.client:
            return None
        try:
            data = await self.client.get(key)
            return json.loads(data) if data else None
        except Exception as e:
            logger.warning(f"Cache read failed for {key}: {str(e)}")
            return None

    async def set(self, key: str, value: Any, expire: int = 3600):
        if not self.client:
            return
        try:
            await self.client.set(key, json.dumps(value), ex=expire)
        except Exception as e:
            logger.warning(f"Cache write failed for {key}: {str(e)}")

redis_config = RedisConfig()

def cached(expire: int = 3600):
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            key = f"{func.__name__}:{str(args)}:{str(kwargs)}"
            cached_result = await redis_config.get(key)
            if cached_result is not None:
                return cached_result
            result = await func(*args, **kwargs)
            await redis_config.set(key, result, expire)
            return result
        return wrapper
    return decorator
