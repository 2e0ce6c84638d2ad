"""
Fee packages, supplements and diet details
"""
import pytest
from httpx import AsyncClient

from gymhub.models import FeePackage


class TestFeePackages:

    @pytest.mark.asyncio
    async def test_crud(self, client: AsyncClient, admin_auth_headers):
        created = await client.post(
            "/api/fee-packages",
            json={"name": "Annual", "duration": "1 Year", "cost": 500, "description": "Best value"},
            headers=admin_auth_headers
        )
        assert created.status_code == 201
        package_id = created.json()["id"]

        updated = await client.put(
            f"/api/fee-packages/{package_id}", json={"cost": 450}, headers=admin_auth_headers
        )
        assert updated.status_code == 200
        assert updated.json()["cost"] == 450
        assert updated.json()["description"] == "Best value"

        listed = await client.get("/api/fee-packages", headers=admin_auth_headers)
        assert [p["name"] for p in listed.json()] == ["Annual"]

        deleted = await client.delete(f"/api/fee-packages/{package_id}", headers=admin_auth_headers)
        assert deleted.json() == {"message": "Fee package removed"}

        missing = await client.get(f"/api/fee-packages/{package_id}", headers=admin_auth_headers)
        assert missing.status_code == 404
        assert missing.json() == {"message": "Fee package not found"}

    @pytest.mark.asyncio
    async def test_duplicate_name(self, client: AsyncClient, admin_auth_headers):
        payload = {"name": "Monthly", "duration": "1 Month", "cost": 50}
        await client.post("/api/fee-packages", json=payload, headers=admin_auth_headers)

        response = await client.post("/api/fee-packages", json=payload, headers=admin_auth_headers)

        assert response.status_code == 400
        assert response.json() == {"message": "Fee package with this name already exists"}

    @pytest.mark.asyncio
    async def test_rename_to_existing_name(self, client: AsyncClient, admin_auth_headers):
        await client.post(
            "/api/fee-packages", json={"name": "Monthly", "duration": "1 Month"}, headers=admin_auth_headers
        )
        other = await client.post(
            "/api/fee-packages", json={"name": "Weekly", "duration": "7 Days"}, headers=admin_auth_headers
        )

        response = await client.put(
            f"/api/fee-packages/{other.json()['id']}", json={"name": "Monthly"}, headers=admin_auth_headers
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_negative_cost(self, client: AsyncClient, admin_auth_headers):
        response = await client.post(
            "/api/fee-packages",
            json={"name": "Broken", "duration": "1 Month", "cost": -5},
            headers=admin_auth_headers
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_free_text_duration_accepted(self, client: AsyncClient, admin_auth_headers):
        """Duration is only parsed when a package is assigned"""
        response = await client.post(
            "/api/fee-packages",
            json={"name": "Trial", "duration": "2 Weeks"},
            headers=admin_auth_headers
        )

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_delete_clears_account_reference(
        self, client: AsyncClient, db_session, admin_auth_headers, member_user
    ):
        """Accounts keep their dates when their package disappears"""
        package = FeePackage(name="Quarterly", duration="3 Months", cost=90)
        db_session.add(package)
        await db_session.commit()

        assigned = await client.put(
            f"/api/members/{member_user.id}/assign-package",
            json={"packageId": package.id, "startDate": "2024-01-15"},
            headers=admin_auth_headers
        )
        assert assigned.status_code == 200

        await client.delete(f"/api/fee-packages/{package.id}", headers=admin_auth_headers)

        response = await client.get(f"/api/members/{member_user.id}", headers=admin_auth_headers)
        data = response.json()
        assert data["current_membership"] is None
        assert data["membership_start_date"] == "2024-01-15"
        assert data["membership_end_date"] == "2024-04-15"


class TestSupplements:

    @pytest.mark.asyncio
    async def test_create_and_update(self, client: AsyncClient, admin_auth_headers):
        created = await client.post(
            "/api/supplements",
            json={"name": "Whey", "description": "Protein", "price": 30.0, "stock": 12},
            headers=admin_auth_headers
        )
        assert created.status_code == 201
        supplement_id = created.json()["id"]

        # null on a required field keeps it; null on an optional field clears it
        updated = await client.put(
            f"/api/supplements/{supplement_id}",
            json={"name": None, "description": None, "stock": 5},
            headers=admin_auth_headers
        )

        assert updated.status_code == 200
        data = updated.json()
        assert data["name"] == "Whey"
        assert data["description"] is None
        assert data["stock"] == 5
        assert data["price"] == 30.0

    @pytest.mark.asyncio
    async def test_duplicate_name(self, client: AsyncClient, admin_auth_headers):
        await client.post("/api/supplements", json={"name": "Creatine"}, headers=admin_auth_headers)

        response = await client.post("/api/supplements", json={"name": "Creatine"}, headers=admin_auth_headers)

        assert response.status_code == 400
        assert response.json() == {"message": "Supplement with this name already exists"}

    @pytest.mark.asyncio
    async def test_fractional_stock_rejected(self, client: AsyncClient, admin_auth_headers):
        response = await client.post(
            "/api/supplements", json={"name": "BCAA", "stock": 2.5}, headers=admin_auth_headers
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient, admin_auth_headers):
        created = await client.post("/api/supplements", json={"name": "Zinc"}, headers=admin_auth_headers)

        response = await client.delete(f"/api/supplements/{created.json()['id']}", headers=admin_auth_headers)

        assert response.json() == {"message": "Supplement removed"}


class TestDietDetails:

    @pytest.mark.asyncio
    async def test_crud(self, client: AsyncClient, admin_auth_headers):
        created = await client.post(
            "/api/diet-details",
            json={"title": "Cutting", "content": "High protein, low carb"},
            headers=admin_auth_headers
        )
        assert created.status_code == 201
        detail_id = created.json()["id"]

        updated = await client.put(
            f"/api/diet-details/{detail_id}", json={"content": "Lean meats"}, headers=admin_auth_headers
        )
        assert updated.json()["title"] == "Cutting"
        assert updated.json()["content"] == "Lean meats"

        fetched = await client.get(f"/api/diet-details/{detail_id}", headers=admin_auth_headers)
        assert fetched.status_code == 200

        deleted = await client.delete(f"/api/diet-details/{detail_id}", headers=admin_auth_headers)
        assert deleted.json() == {"message": "Diet detail removed"}

    @pytest.mark.asyncio
    async def test_duplicate_title(self, client: AsyncClient, admin_auth_headers):
        payload = {"title": "Bulking", "content": "Eat more"}
        await client.post("/api/diet-details", json=payload, headers=admin_auth_headers)

        response = await client.post("/api/diet-details", json=payload, headers=admin_auth_headers)

        assert response.status_code == 400
        assert response.json() == {"message": "Diet detail with this title already exists"}

    @pytest.mark.asyncio
    async def test_missing_content(self, client: AsyncClient, admin_auth_headers):
        response = await client.post("/api/diet-details", json={"title": "Empty"}, headers=admin_auth_headers)

        assert response.status_code == 400
        assert "content" in response.json()["message"]
