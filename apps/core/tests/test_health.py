"""
Tests for the health check and JSON error handlers.
"""

import pytest
from rest_framework import status


@pytest.mark.django_db
class TestHealthCheck:

    def test_health_check_pings_database(self, api_client):
        response = api_client.get('/api/health/')

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'status': 'ok', 'database': True}

    def test_health_check_needs_no_token(self, api_client):
        response = api_client.get('/api/health/')

        assert response.status_code != status.HTTP_401_UNAUTHORIZED
