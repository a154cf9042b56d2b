"""
Shared fixtures: canned marketplace payloads and a mocked httpx client that
routes requests to them.
"""

import logging
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from infrastructure.marketplace.client import MarketplaceClient

TEST_BASE_URL = 'https://api.marketplace.test'


SITES_RESPONSE = [
    {'id': 'MLA', 'name': 'Argentina'},
    {'id': 'MLB', 'name': 'Brasil'},
]

SITE_RESPONSES = {
    'MLA': {
        'id': 'MLA',
        'name': 'Argentina',
        'country_id': 'AR',
        'sale_fees_mode': 'not_free',
        'mercadopago_version': 3,
        'default_currency_id': 'ARS',
        'immediate_payment': 'required',
    },
    'MLB': {
        'id': 'MLB',
        'name': 'Brasil',
        'country_id': 'BR',
        'default_currency_id': 'BRL',
    },
}

CONVERSION_RESPONSES = {
    ('ARS', 'USD'): {'currency_base': 'ARS', 'currency_quote': 'USD', 'ratio': 0.0025, 'rate': 0.0025, 'inv_rate': 400},
    ('BRL', 'USD'): {'currency_base': 'BRL', 'currency_quote': 'USD', 'ratio': 0.20, 'rate': 0.20, 'inv_rate': 5},
}


def build_response(json_data=None, status_code=200, text=None):
    response = Mock()
    response.status_code = status_code
    response.text = text if text is not None else str(json_data)
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data

    if status_code >= 400:
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            f'HTTP {status_code}', request=Mock(), response=response
        )
    else:
        response.raise_for_status = Mock()
    return response


@pytest.fixture
def make_response():
    """Factory for mocked httpx responses"""
    return build_response


@pytest.fixture
def routes():
    """Path (plus from/to query for conversions) -> response or exception"""
    table = {
        '/sites': build_response(SITES_RESPONSE),
    }
    for site_id, payload in SITE_RESPONSES.items():
        table[f'/sites/{site_id}'] = build_response(payload)
    for (from_currency, to_currency), payload in CONVERSION_RESPONSES.items():
        table[f'/currency_conversions/search?from={from_currency}&to={to_currency}'] = build_response(payload)
    return table


@pytest.fixture
def mock_http_client(routes):
    mock_client = AsyncMock(spec=httpx.AsyncClient)

    async def get(url, params=None):
        key = url.removeprefix(TEST_BASE_URL)
        if params:
            key = f"{key}?from={params['from']}&to={params['to']}"
        route = routes.get(key)
        if route is None:
            return build_response({'message': 'not found', 'status': 404}, 404)
        if isinstance(route, Exception):
            raise route
        return route

    mock_client.get.side_effect = get
    return mock_client


@pytest.fixture
def marketplace_client(mock_http_client):
    return MarketplaceClient(base_url=TEST_BASE_URL, client=mock_http_client)


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
