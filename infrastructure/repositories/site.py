import logging

from domain.models.marketplace import Site, SiteSummary
from infrastructure.marketplace.client import MarketplaceClient
from infrastructure.marketplace.schemas import SiteListPayload, SitePayload

logger = logging.getLogger(__name__)


class SiteRepository:
	def __init__(self, client: MarketplaceClient):
		self.client = client

	async def list_sites(self) -> list[SiteSummary]:
		payload = await self.client.get('sites', SiteListPayload)
		sites = [SiteSummary(id=s.id, name=s.name) for s in payload]
		logger.debug(f'Fetched {len(sites)} sites')
		return sites

	async def get_site(self, site_id: str) -> Site:
		payload = await self.client.get(f'sites/{site_id}', SitePayload)
		return Site(
			id=payload.id,
			name=payload.name,
			country_id=payload.country_id,
			default_currency_id=payload.default_currency_id,
		)
