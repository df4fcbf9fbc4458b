"""Tests for POST /auth/login."""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient


class TestLogin:
    """Tests for the login endpoint."""

    @pytest.mark.asyncio
    async def test_success(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/auth/login", json={"username": "admin", "password": "admin"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["user"] == {"username": "admin"}
        assert isinstance(data["token"], str) and data["token"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"username": "admin"},
            {"password": "admin"},
            {"username": "", "password": "admin"},
        ],
    )
    async def test_missing_fields(self, async_client: AsyncClient, body: dict) -> None:
        response = await async_client.post("/auth/login", json=body)

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Username and password are required"

    @pytest.mark.asyncio
    async def test_wrong_password(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/auth/login", json={"username": "admin", "password": "hunter2"}
        )

        assert response.status_code == 401
        error = response.json()["error"]
        assert error["code"] == "INVALID_CREDENTIALS"
        assert error["message"] == "Invalid credentials"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"username": "admin", "password": "admin "},
            {"username": " admin", "password": "admin"},
            {"username": "admin", "password": "   "},
        ],
    )
    async def test_credentials_are_not_trimmed(
        self, async_client: AsyncClient, body: dict
    ) -> None:
        response = await async_client.post("/auth/login", json=body)

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"

    @pytest.mark.asyncio
    async def test_unknown_user(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/auth/login", json={"username": "ash", "password": "admin"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_issued_token_verifies(
        self, app: FastAPI, async_client: AsyncClient
    ) -> None:
        response = await async_client.post(
            "/auth/login", json={"username": "admin", "password": "admin"}
        )

        claims = app.state.auth_service.verify_token(response.json()["token"])

        assert claims["username"] == "admin"
