import uuid

import redis

from app.utils.retry import redis_retry
from app.utils.settings import REDIS_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)

#LUA porownaj i usun, atomicity
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""

#redis wykonuje skrypt lua atomowo, nikt nie wcisnie sie miedzy GET a DEL


class LockService:
    """
    -blokada checkoutu koszyka (jedno zamowienie z koszyka naraz)
    -zwalnianie locka tylko przez wlasciciela tokenu
    -atomowosc przy pomocy lua
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @staticmethod
    def _key(cart_id: int) -> str:
        return f"cart:{cart_id}:checkout"

    def acquire_checkout_lock(self, cart_id: int, ttl: int) -> str | None:
        """Zwraca token locka albo None, jesli checkout juz trwa."""
        key = self._key(cart_id)
        #token staly dla wszystkich prob, retry rozpozna wlasny zapis
        token = uuid.uuid4().hex
        logger.info(f"Acquire lock {key}")
        return token if self._set_lock(key, token, ttl) else None

    @redis_retry()
    def _set_lock(self, key: str, token: str, ttl: int) -> bool:
        #SET cart:1:checkout <token> NX EX 30
        acquired = self.redis.set(
            name=key,
            value=token,
            nx=True, #tylko jesli klucz nie istnieje
            ex=ttl, #wygasa sam, nawet jak proces padnie
        )
        if acquired:
            return True
        #poprzednia proba mogla zapisac klucz i zgubic odpowiedz
        return self.redis.get(key) == token

    @redis_retry()
    def release_checkout_lock(self, cart_id: int, token: str) -> bool:
        key = self._key(cart_id)
        logger.info(f"Release lock {key}")
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)
