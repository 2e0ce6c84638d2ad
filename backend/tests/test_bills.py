import pytest
from httpx import AsyncClient
from sqlalchemy import select, func

from gymhub.models import Bill

UNKNOWN_ID = "2b1f4c55-0000-4000-8000-000000000000"


async def create_bill(client, headers, member_id, **overrides):
    payload = {"memberId": member_id, "amount": 49.5, "date": "2024-03-01", **overrides}
    return await client.post("/api/bills", json=payload, headers=headers)


class TestBillCreate:

    @pytest.mark.asyncio
    async def test_create_for_member(self, client: AsyncClient, admin_auth_headers, member_user):
        response = await create_bill(client, admin_auth_headers, member_user.id)

        assert response.status_code == 201
        data = response.json()
        assert data["member_id"] == member_user.id
        assert data["member"] == {"id": member_user.id, "username": member_user.username, "role": "Member"}
        assert data["amount"] == 49.5
        assert data["date"] == "2024-03-01"
        assert data["status"] == "Pending"

    @pytest.mark.asyncio
    async def test_create_for_plain_user(self, client: AsyncClient, admin_auth_headers, plain_user):
        response = await create_bill(client, admin_auth_headers, plain_user.id, status="Paid")

        assert response.status_code == 201
        assert response.json()["status"] == "Paid"

    @pytest.mark.asyncio
    async def test_create_for_admin_rejected(self, client: AsyncClient, db_session, admin_user, admin_auth_headers):
        response = await create_bill(client, admin_auth_headers, admin_user.id)

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid or non-member user ID provided"}
        assert await db_session.scalar(select(func.count(Bill.id))) == 0

    @pytest.mark.asyncio
    async def test_create_for_unknown_account(self, client: AsyncClient, admin_auth_headers):
        response = await create_bill(client, admin_auth_headers, UNKNOWN_ID)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_negative_amount(self, client: AsyncClient, admin_auth_headers, member_user):
        response = await create_bill(client, admin_auth_headers, member_user.id, amount=-1)

        assert response.status_code == 400
        assert "amount" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_unknown_status(self, client: AsyncClient, admin_auth_headers, member_user):
        response = await create_bill(client, admin_auth_headers, member_user.id, status="Refunded")

        assert response.status_code == 400


class TestBillLifecycle:

    @pytest.mark.asyncio
    async def test_list_populates_member(self, client: AsyncClient, admin_auth_headers, member_user, plain_user):
        await create_bill(client, admin_auth_headers, member_user.id)
        await create_bill(client, admin_auth_headers, plain_user.id)

        response = await client.get("/api/bills", headers=admin_auth_headers)

        assert response.status_code == 200
        usernames = {bill["member"]["username"] for bill in response.json()}
        assert usernames == {member_user.username, plain_user.username}

    @pytest.mark.asyncio
    async def test_partial_update(self, client: AsyncClient, admin_auth_headers, member_user):
        bill_id = (await create_bill(client, admin_auth_headers, member_user.id)).json()["id"]

        response = await client.put(f"/api/bills/{bill_id}", json={"status": "Paid"}, headers=admin_auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Paid"
        assert data["amount"] == 49.5
        assert data["date"] == "2024-03-01"

    @pytest.mark.asyncio
    async def test_reassign_member(self, client: AsyncClient, admin_auth_headers, member_user, plain_user):
        bill_id = (await create_bill(client, admin_auth_headers, member_user.id)).json()["id"]

        response = await client.put(
            f"/api/bills/{bill_id}", json={"memberId": plain_user.id}, headers=admin_auth_headers
        )

        assert response.status_code == 200
        assert response.json()["member_id"] == plain_user.id
        assert response.json()["member"]["username"] == plain_user.username

    @pytest.mark.asyncio
    async def test_reassign_to_admin_rejected(self, client: AsyncClient, admin_user, admin_auth_headers, member_user):
        bill_id = (await create_bill(client, admin_auth_headers, member_user.id)).json()["id"]

        response = await client.put(
            f"/api/bills/{bill_id}", json={"memberId": admin_user.id}, headers=admin_auth_headers
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_get_and_delete(self, client: AsyncClient, admin_auth_headers, member_user):
        bill_id = (await create_bill(client, admin_auth_headers, member_user.id)).json()["id"]

        fetched = await client.get(f"/api/bills/{bill_id}", headers=admin_auth_headers)
        assert fetched.status_code == 200

        deleted = await client.delete(f"/api/bills/{bill_id}", headers=admin_auth_headers)
        assert deleted.json() == {"message": "Bill removed"}

        missing = await client.get(f"/api/bills/{bill_id}", headers=admin_auth_headers)
        assert missing.status_code == 404
        assert missing.json() == {"message": "Bill not found"}
