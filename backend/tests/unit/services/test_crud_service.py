"""
Unit Tests for the generic CRUD service
"""
import pytest

from gymhub.core.exceptions import ConflictError, ResourceNotFoundError
from gymhub.models import Supplement
from gymhub.services.crud_service import CRUDService

service = CRUDService(Supplement, "Supplement", unique_field="name")


class TestCRUDService:

    @pytest.mark.asyncio
    async def test_create_and_get(self, db_session):
        created = await service.create(db_session, {"name": "Whey", "price": 25.0, "stock": 3})

        fetched = await service.get(db_session, created.id)

        assert fetched.name == "Whey"
        assert fetched.created_at is not None

    @pytest.mark.asyncio
    async def test_get_unknown(self, db_session):
        with pytest.raises(ResourceNotFoundError) as exc_info:
            await service.get(db_session, "2b1f4c55-0000-4000-8000-000000000000")

        assert exc_info.value.message == "Supplement not found"
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_get_malformed_id(self, db_session):
        with pytest.raises(ResourceNotFoundError):
            await service.get(db_session, "12345")

    @pytest.mark.asyncio
    async def test_create_duplicate(self, db_session):
        await service.create(db_session, {"name": "Whey"})

        with pytest.raises(ConflictError) as exc_info:
            await service.create(db_session, {"name": "Whey"})

        assert exc_info.value.message == "Supplement with this name already exists"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_update_is_partial(self, db_session):
        record = await service.create(db_session, {"name": "Zinc", "description": "Mineral", "price": 5.0})

        await service.update(db_session, record, {"price": 6.0})

        assert record.name == "Zinc"
        assert record.description == "Mineral"
        assert record.price == 6.0

    @pytest.mark.asyncio
    async def test_update_null_rules(self, db_session):
        """Nulls are ignored on required columns and clear optional ones"""
        record = await service.create(db_session, {"name": "Zinc", "description": "Mineral"})

        await service.update(db_session, record, {"name": None, "description": None})

        assert record.name == "Zinc"
        assert record.description is None

    @pytest.mark.asyncio
    async def test_update_same_name_is_not_a_conflict(self, db_session):
        record = await service.create(db_session, {"name": "Zinc"})

        await service.update(db_session, record, {"name": "Zinc", "stock": 9})

        assert record.stock == 9

    @pytest.mark.asyncio
    async def test_rename_conflict(self, db_session):
        await service.create(db_session, {"name": "Zinc"})
        other = await service.create(db_session, {"name": "Iron"})

        with pytest.raises(ConflictError):
            await service.update(db_session, other, {"name": "Zinc"})

        assert other.name == "Iron"

    @pytest.mark.asyncio
    async def test_list_and_delete(self, db_session):
        first = await service.create(db_session, {"name": "A"})
        await service.create(db_session, {"name": "B"})

        await service.delete(db_session, first)

        remaining = await service.list(db_session)
        assert [s.name for s in remaining] == ["B"]

    @pytest.mark.asyncio
    async def test_list_with_criteria(self, db_session):
        await service.create(db_session, {"name": "A", "stock": 0})
        await service.create(db_session, {"name": "B", "stock": 4})

        in_stock = await service.list(db_session, Supplement.stock > 0, order_by=Supplement.name)

        assert [s.name for s in in_stock] == ["B"]
