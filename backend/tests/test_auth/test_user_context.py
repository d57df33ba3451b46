"""Tests for caller identity extraction and role gating."""

import uuid

import pytest
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient

from accommodation_service.auth.dependencies import (
    UserContext,
    UserRole,
    check_role,
    require_role,
    resolve_user_context,
)
from accommodation_service.exceptions import RoleNotPermittedError, UnauthenticatedError


class TestResolveUserContext:
    def test_valid_headers(self):
        user_id = uuid.uuid4()
        context = resolve_user_context(str(user_id), "HOST")
        assert context == UserContext(user_id=user_id, role="HOST")

    @pytest.mark.parametrize(
        ("user_id", "role"),
        [
            (None, "HOST"),
            ("", "HOST"),
            (str(uuid.uuid4()), None),
            (str(uuid.uuid4()), ""),
            (None, None),
        ],
    )
    def test_missing_values(self, user_id, role):
        with pytest.raises(UnauthenticatedError):
            resolve_user_context(user_id, role)

    def test_malformed_user_id(self):
        with pytest.raises(UnauthenticatedError):
            resolve_user_context("user-42", "HOST")


class TestCheckRole:
    def test_allowed(self):
        context = UserContext(user_id=uuid.uuid4(), role="HOST")
        assert check_role(context, frozenset({"HOST"})) is context

    def test_not_allowed(self):
        context = UserContext(user_id=uuid.uuid4(), role="GUEST")
        with pytest.raises(RoleNotPermittedError):
            check_role(context, frozenset({"HOST"}))

    def test_role_match_is_case_sensitive(self):
        context = UserContext(user_id=uuid.uuid4(), role="host")
        with pytest.raises(RoleNotPermittedError):
            check_role(context, frozenset({"HOST"}))


class TestRequireRole:
    """Exercise the dependency on a throwaway app with several permitted roles."""

    @pytest.fixture
    def gated_client(self):
        gated = FastAPI()

        @gated.get("/gated")
        async def gated_route(caller: UserContext = Depends(require_role(UserRole.HOST, UserRole.ADMIN))):
            return {"user_id": str(caller.user_id), "role": caller.role}

        return AsyncClient(transport=ASGITransport(app=gated), base_url="http://testserver")

    async def test_each_permitted_role_passes(self, gated_client: AsyncClient):
        user_id = uuid.uuid4()
        async with gated_client as client:
            for role in ("HOST", "ADMIN"):
                response = await client.get("/gated", headers={"X-User-Id": str(user_id), "X-User-Role": role})
                assert response.status_code == 200
                assert response.json() == {"user_id": str(user_id), "role": role}

    async def test_other_role_forbidden(self, gated_client: AsyncClient):
        async with gated_client as client:
            response = await client.get("/gated", headers={"X-User-Id": str(uuid.uuid4()), "X-User-Role": "GUEST"})
        assert response.status_code == 403

    async def test_missing_headers_unauthorized(self, gated_client: AsyncClient):
        async with gated_client as client:
            response = await client.get("/gated")
        assert response.status_code == 401

    async def test_malformed_user_id_unauthorized(self, gated_client: AsyncClient):
        async with gated_client as client:
            response = await client.get("/gated", headers={"X-User-Id": "abc", "X-User-Role": "HOST"})
        assert response.status_code == 401
