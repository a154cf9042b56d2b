import logging

from application.services.aggregator import ConversionAggregator
from application.services.conversion_resolver import ConversionResolver
from config.settings import Settings
from infrastructure.marketplace.client import MarketplaceClient
from infrastructure.repositories.site import SiteRepository

logger = logging.getLogger(__name__)


class ServiceFactory:
	"""Wires the marketplace client, repository, resolver and aggregator from settings."""

	def __init__(self, settings: Settings, client: MarketplaceClient | None = None):
		self.settings = settings
		self.client = client or MarketplaceClient(
			base_url=settings.MARKETPLACE_BASE_URL,
			timeout=settings.REQUEST_TIMEOUT_SECONDS,
		)
		self.site_repository = SiteRepository(self.client)
		self.resolver = ConversionResolver(self.site_repository, self.client)

	def create_aggregator(self) -> ConversionAggregator:
		aggregator = ConversionAggregator(
			site_repository=self.site_repository,
			resolver=self.resolver,
			reference_currency=self.settings.REFERENCE_CURRENCY,
			max_concurrency=self.settings.MAX_CONCURRENCY,
			site_timeout=self.settings.SITE_TIMEOUT_SECONDS,
			buffer_size=self.settings.RESULT_BUFFER_SIZE,
		)
		logger.debug(
			f'Aggregator created for {self.client.base_url} '
			f'(reference={self.settings.REFERENCE_CURRENCY}, '
			f'max_concurrency={self.settings.MAX_CONCURRENCY or "unbounded"})'
		)
		return aggregator

	async def cleanup(self) -> None:
		await self.client.close()
		logger.debug('Marketplace client closed')
