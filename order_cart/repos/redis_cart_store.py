# order_cart/repos/redis_cart_store.py
import redis

from order_cart.domain.cart import Cart
from order_cart.domain.errors import ConcurrentModification
from order_cart.repos.cart_store import CartStore
from order_cart.utils.logging import get_logger
from order_cart.utils.retry import redis_retry
from order_cart.utils.settings import REDIS_URL

logger = get_logger(__name__)

#hash cart:{owner} -> {version, doc}
#both scripts run atomically, nothing can land between the check and the HSET

_CREATE_LUA = """
if redis.call('EXISTS', KEYS[1]) == 1 then
    return 0
end
redis.call('HSET', KEYS[1], 'version', ARGV[1], 'doc', ARGV[2])
return 1
"""

_UPDATE_LUA = """
if redis.call('HGET', KEYS[1], 'version') ~= ARGV[1] then
    return 0
end
redis.call('HSET', KEYS[1], 'version', ARGV[2], 'doc', ARGV[3])
return 1
"""


def _key(owner: str) -> str:
    return f"cart:{owner}"


class RedisCartStore(CartStore):
    """
    -one hash per owner
    -compare-and-set on the version field with lua
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.url = url or REDIS_URL
        self.redis = client

    def open(self) -> None:
        if self.redis is None:
            self.redis = redis.Redis.from_url(self.url, decode_responses=True)
        logger.info("RedisCartStore opened")

    def close(self) -> None:
        if self.redis is not None:
            self.redis.close()
            logger.info("RedisCartStore closed")
        self.redis = None

    def _client(self) -> redis.Redis:
        if self.redis is None:
            raise RuntimeError("RedisCartStore is not open")
        return self.redis

    @redis_retry()
    def get(self, owner: str) -> Cart | None:
        doc = self._client().hget(_key(owner), "doc")
        return Cart.model_validate_json(doc) if doc else None

    def create(self, cart: Cart) -> Cart:
        stored = cart.model_copy(update={"version": 1}, deep=True)
        created = self._client().eval(
            _CREATE_LUA, 1, _key(cart.owner), "1", stored.model_dump_json()
        )
        if not created:
            raise ConcurrentModification(cart.owner, expected_version=0)

        logger.info(f"Created cart for owner {cart.owner} in redis")
        return stored

    def update(self, cart: Cart, expected_version: int) -> Cart:
        stored = cart.model_copy(update={"version": expected_version + 1}, deep=True)
        updated = self._client().eval(
            _UPDATE_LUA,
            1,
            _key(cart.owner),
            str(expected_version),
            str(stored.version),
            stored.model_dump_json(),
        )
        if not updated:
            raise ConcurrentModification(cart.owner, expected_version)

        logger.info(f"Updated cart for owner {cart.owner} in redis, version {stored.version}")
        return stored

    @redis_retry()
    def delete(self, owner: str) -> None:
        self._client().delete(_key(owner))
        logger.info(f"Deleted cart for owner {owner} in redis")
