"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from tests import factories


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user(db):
    return factories.create_user()


@pytest.fixture
def token(user) -> Token:
    return Token.objects.create(user=user)


@pytest.fixture
def auth_client(api_client: APIClient, token: Token) -> APIClient:
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")
    return api_client


@pytest.fixture
def eligible_user(user):
    enrollment = factories.create_enrollment(user)
    ticket_type = factories.create_ticket_type(includes_hotel=True)
    factories.create_ticket(enrollment, ticket_type, status="PAID")
    return user
