"""
Administrator-only routes reject missing, expired and non-admin tokens
without touching any data.
"""
import pytest
from datetime import timedelta
from httpx import AsyncClient
from sqlalchemy import select, func

from gymhub.core.security import create_access_token
from gymhub.models import FeePackage

ADMIN_ROUTES = [
    ("get", "/api/members"),
    ("get", "/api/bills"),
    ("get", "/api/fee-packages"),
    ("get", "/api/supplements"),
    ("get", "/api/diet-details"),
    ("get", "/api/notifications"),
    ("get", "/api/admin/dashboard-stats"),
    ("get", "/api/admin/export-report"),
]

NEW_PACKAGE = {"name": "Gold", "duration": "3 Months", "cost": 120}


async def count_packages(db_session) -> int:
    return await db_session.scalar(select(func.count(FeePackage.id)))


class TestAdminGate:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path", ADMIN_ROUTES)
    async def test_no_token(self, client: AsyncClient, method, path):
        response = await getattr(client, method)(path)

        assert response.status_code == 401

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path", ADMIN_ROUTES)
    async def test_member_token(self, client: AsyncClient, member_auth_headers, method, path):
        response = await getattr(client, method)(path, headers=member_auth_headers)

        assert response.status_code == 403
        assert response.json() == {"message": "Not authorized as an admin"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path", ADMIN_ROUTES)
    async def test_admin_token(self, client: AsyncClient, admin_auth_headers, method, path):
        response = await getattr(client, method)(path, headers=admin_auth_headers)

        assert response.status_code == 200


class TestNoMutationWhenRejected:

    @pytest.mark.asyncio
    async def test_create_without_token(self, client: AsyncClient, db_session):
        response = await client.post("/api/fee-packages", json=NEW_PACKAGE)

        assert response.status_code == 401
        assert await count_packages(db_session) == 0

    @pytest.mark.asyncio
    async def test_create_with_expired_token(self, client: AsyncClient, db_session, admin_user):
        """Even an administrator's token stops working once expired"""
        token = create_access_token(str(admin_user.id), expires_delta=timedelta(seconds=-10))

        response = await client.post(
            "/api/fee-packages",
            json=NEW_PACKAGE,
            headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized, token expired"}
        assert await count_packages(db_session) == 0

    @pytest.mark.asyncio
    async def test_create_with_member_token(self, client: AsyncClient, db_session, member_auth_headers):
        response = await client.post("/api/fee-packages", json=NEW_PACKAGE, headers=member_auth_headers)

        assert response.status_code == 403
        assert await count_packages(db_session) == 0

    @pytest.mark.asyncio
    async def test_create_with_user_token(self, client: AsyncClient, db_session, user_auth_headers):
        response = await client.post("/api/fee-packages", json=NEW_PACKAGE, headers=user_auth_headers)

        assert response.status_code == 403
        assert await count_packages(db_session) == 0


class TestTokenOwner:

    @pytest.mark.asyncio
    async def test_token_for_deleted_account(self, client: AsyncClient, admin_auth_headers, plain_user):
        headers = {"Authorization": f"Bearer {create_access_token(str(plain_user.id))}"}

        deleted = await client.delete(f"/api/members/{plain_user.id}", headers=admin_auth_headers)
        assert deleted.status_code == 200

        response = await client.get("/api/users/profile", headers=headers)

        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized, user not found"}

    @pytest.mark.asyncio
    async def test_token_with_non_uuid_subject(self, client: AsyncClient):
        token = create_access_token("not-an-id")

        response = await client.get("/api/users/profile", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
