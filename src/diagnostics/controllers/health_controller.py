import logging

from django.db import DatabaseError, connection
from ninja_extra import api_controller, route

from src.core.apis import BaseAPIController
from src.core.exceptions import ServiceUnavailableError

logger = logging.getLogger(__name__)


def database_ping() -> None:
    with connection.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()


@api_controller("/diagnostics", tags=["Diagnostics"])
class HealthController(BaseAPIController):
    @route.get("/health")
    def health(self):
        try:
            database_ping()
        except DatabaseError:
            logger.warning("health: database ping failed", exc_info=True)
            raise ServiceUnavailableError(message="Database unavailable", code="DATABASE_UNAVAILABLE")
        return self.create_response(message="OK", data={"database": "ok"}, status_code=200)
