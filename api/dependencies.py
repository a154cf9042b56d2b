import logging
from typing import Annotated

from fastapi import Depends

from application.services import ConversionAggregator, ServiceFactory
from config.settings import get_settings
from infrastructure.repositories.site import SiteRepository

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	factory: ServiceFactory | None = None
	aggregator: ConversionAggregator | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	deps.factory = ServiceFactory(get_settings())
	deps.aggregator = deps.factory.create_aggregator()
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.factory:
		await deps.factory.cleanup()
	deps.factory = None
	deps.aggregator = None

	logger.info('Cleanup complete')


def get_service_factory() -> ServiceFactory:
	if deps.factory is None:
		raise RuntimeError('Dependencies not initialized')
	return deps.factory


def get_aggregator() -> ConversionAggregator:
	if deps.aggregator is None:
		raise RuntimeError('Aggregator not initialized')
	return deps.aggregator


def get_site_repository(
	factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> SiteRepository:
	return factory.site_repository
