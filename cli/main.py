import asyncio
import json
import logging
import sys

from application.services import ServiceFactory
from config.logging_config import configure_logging
from config.settings import Settings, get_settings
from domain.exceptions.marketplace import FetchError

logger = logging.getLogger(__name__)


async def run(settings: Settings, factory: ServiceFactory | None = None) -> int:
	"""Print every site currency's ratio to the reference currency as one JSON object."""
	factory = factory or ServiceFactory(settings)
	try:
		aggregator = factory.create_aggregator()
		try:
			rates = await aggregator.get_all_currencies()
		except FetchError as e:
			logger.debug('Site listing failed', exc_info=True)
			print(f'Error when trying to get currencies: {e}', file=sys.stderr)
			return 1

		print(json.dumps(rates))
		return 0
	finally:
		await factory.cleanup()


def main() -> None:
	settings = get_settings()
	configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
	sys.exit(asyncio.run(run(settings)))


if __name__ == '__main__':
	main()
