import logging
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from domain.exceptions.marketplace import DecodeError, FetchError

logger = logging.getLogger(__name__)


class MarketplaceClient:
	"""GETs JSON documents from the marketplace API and decodes them into typed payloads."""

	BASE_URL = 'https://api.mercadolibre.com'

	def __init__(
		self,
		base_url: str | None = None,
		client: httpx.AsyncClient | None = None,
		timeout: float = 10,
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(
			timeout=timeout,
			headers={'accept': 'application/json'},
		)

	async def get_json(self, endpoint: str, params: dict | None = None) -> Any:
		url = f'{self.base_url}/{endpoint.lstrip("/")}'

		try:
			response = await self._client.get(url, params=params)
			response.raise_for_status()
			return response.json()

		except httpx.HTTPStatusError as e:
			raise FetchError(
				f'Marketplace HTTP error {e.response.status_code} for {url}: {e.response.text[:200]}',
				url=url,
				status_code=e.response.status_code,
			) from e
		except httpx.RequestError as e:
			raise FetchError(
				f'Marketplace request failed for {url}: {e.__class__.__name__}', url=url
			) from e
		except ValueError as e:
			raise DecodeError(f'Marketplace returned invalid JSON for {url}: {e}', url=url) from e

	async def get(
		self, endpoint: str, model: type[BaseModel] | TypeAdapter, params: dict | None = None
	) -> Any:
		"""GET ``endpoint`` and validate the body against ``model``."""
		data = await self.get_json(endpoint, params)
		try:
			if isinstance(model, TypeAdapter):
				return model.validate_python(data)
			return model.model_validate(data)
		except ValidationError as e:
			logger.debug(f'Unexpected payload from {endpoint}: {data!r}')
			raise DecodeError(
				f'Unexpected response shape from {endpoint}: {e.error_count()} validation error(s)',
				url=f'{self.base_url}/{endpoint.lstrip("/")}',
			) from e

	async def close(self) -> None:
		await self._client.aclose()
