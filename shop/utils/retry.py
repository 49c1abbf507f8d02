# shop/utils/retry.py
from sqlalchemy.exc import OperationalError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from shop.utils.settings import DB_INIT_ATTEMPTS


def db_retry():
    # startup only, request handling never retries
    return retry(
        reraise=True,
        stop=stop_after_attempt(DB_INIT_ATTEMPTS),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        retry=retry_if_exception_type(OperationalError),
    )
