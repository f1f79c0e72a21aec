"""API tests for database failure reporting."""

from sqlalchemy.exc import OperationalError

from app.db.session import get_db
from app.main import app as fastapi_app


def _broken_db():
    raise OperationalError("SELECT 1", {}, Exception("database is locked"))


class TestDatabaseErrors:

    def test_database_error_reported_with_backend_message(self, client, auth_headers):
        fastapi_app.dependency_overrides[get_db] = _broken_db
        try:
            response = client.get("/api/v1/checkins", headers=auth_headers)
        finally:
            fastapi_app.dependency_overrides.pop(get_db, None)

        assert response.status_code == 500
        assert response.json() == {"detail": "database is locked"}

    def test_service_recovers_after_override_removed(self, client, auth_headers):
        fastapi_app.dependency_overrides[get_db] = _broken_db
        try:
            client.get("/api/v1/auth/me", headers=auth_headers)
        finally:
            fastapi_app.dependency_overrides.pop(get_db, None)

        assert client.get("/api/v1/auth/me", headers=auth_headers).status_code == 200
