# app/utils/retry.py
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

#ponawiamy tylko bledy sieciowe, bledy skryptu/komendy leca od razu
TRANSIENT_REDIS_ERRORS = (RedisConnectionError, RedisTimeoutError)


def redis_retry(attempts: int = 3):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type(TRANSIENT_REDIS_ERRORS),
    )
