import logging

from domain.models.marketplace import CurrencyConversion
from infrastructure.marketplace.client import MarketplaceClient
from infrastructure.marketplace.schemas import CurrencyConversionPayload
from infrastructure.repositories.site import SiteRepository

logger = logging.getLogger(__name__)


class ConversionResolver:
	def __init__(self, site_repository: SiteRepository, client: MarketplaceClient):
		self.site_repository = site_repository
		self.client = client

	async def resolve(self, site_id: str, target_currency: str) -> CurrencyConversion:
		site = await self.site_repository.get_site(site_id)

		payload = await self.client.get(
			'currency_conversions/search',
			CurrencyConversionPayload,
			params={'from': site.default_currency_id, 'to': target_currency},
		)

		logger.debug(
			f'{site_id}: {site.default_currency_id} -> {target_currency} = {payload.ratio}'
		)
		return CurrencyConversion(
			from_currency=site.default_currency_id,
			to_currency=target_currency,
			ratio=payload.ratio,
		)
