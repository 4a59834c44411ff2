"""
Simple test cases to verify test configuration.
"""
import pytest
from httpx import AsyncClient
from sqlalchemy import text

@pytest.mark.asyncio
async def test_app_exists(client: AsyncClient):
    """Test that app exists."""
    assert client is not None

@pytest.mark.asyncio
async def test_database_session(session_factory):
    """Test that database session works."""
    async with session_factory() as session:
        result = await session.execute(text("SELECT 1"))
        assert result.scalar() == 1

@pytest.mark.asyncio
async def test_trace_id_is_echoed(client: AsyncClient):
    response = await client.get("/api/breeders", headers={"X-Trace-ID": "abc123"})
    assert response.headers["X-Trace-ID"] == "abc123"

@pytest.mark.asyncio
async def test_trace_id_is_generated(client: AsyncClient):
    response = await client.get("/api/breeders")
    assert response.headers["X-Trace-ID"]
