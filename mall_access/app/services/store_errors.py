import functools
import logging

from mall_access.libs.result import Error, Return
from mall_access.app.services.unit_of_work import StoreError

logger = logging.getLogger(__name__)


def handle_store_errors(message: str):
    """
    Turn a StoreError raised inside a use case into Error("STORE_ERROR").

    The caller only sees the generic message; the cause goes to the
    operational log.
    """

    def decorator(execute):
        @functools.wraps(execute)
        async def wrapper(self, *args, **kwargs):
            try:
                return await execute(self, *args, **kwargs)
            except StoreError:
                logger.exception(f"{type(self).__name__}: data store failure")
                return Return.err(Error("STORE_ERROR", message))

        return wrapper

    return decorator
