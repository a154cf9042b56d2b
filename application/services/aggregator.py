import asyncio
import logging
from datetime import datetime

from application.services.conversion_resolver import ConversionResolver
from domain.models.marketplace import (
	ConversionReport,
	ConversionTable,
	CurrencyConversion,
	SiteFailure,
	SiteOutcome,
)
from infrastructure.repositories.site import SiteRepository

logger = logging.getLogger(__name__)


class ConversionAggregator:
	"""
	Converts the default currency of every marketplace site to one reference currency.

	One resolver task runs per site and each sends exactly one ``SiteOutcome``
	through a queue. A single collector task, started before any resolver,
	reads exactly as many outcomes as there are sites and is the only writer
	of the report. A site that fails, or exceeds ``site_timeout``, is dropped
	from the table and listed in ``ConversionReport.failures``.

	When two sites share a default currency, the outcome that reaches the
	collector last wins.
	"""

	def __init__(
		self,
		site_repository: SiteRepository,
		resolver: ConversionResolver,
		reference_currency: str = 'USD',
		max_concurrency: int | None = None,
		site_timeout: float | None = None,
		buffer_size: int = 1,
	):
		if max_concurrency is not None and max_concurrency < 1:
			raise ValueError('max_concurrency must be at least 1')
		if buffer_size < 1:
			raise ValueError('buffer_size must be at least 1')

		self.site_repository = site_repository
		self.resolver = resolver
		self.reference_currency = reference_currency
		self.max_concurrency = max_concurrency
		self.site_timeout = site_timeout
		self.buffer_size = buffer_size

	async def get_all_currencies(self, target_currency: str | None = None) -> ConversionTable:
		report = await self.aggregate(target_currency)
		return report.rates

	async def aggregate(self, target_currency: str | None = None) -> ConversionReport:
		target = target_currency or self.reference_currency
		start_time = datetime.now()

		# A failed site listing is fatal: nothing is spawned
		sites = await self.site_repository.list_sites()

		report = ConversionReport(reference_currency=target, sites_total=len(sites))
		if not sites:
			logger.info('No sites to resolve')
			return report

		channel: asyncio.Queue[SiteOutcome] = asyncio.Queue(maxsize=self.buffer_size)
		semaphore = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None

		collector = asyncio.create_task(self._collect(channel, len(sites), report))
		workers = [
			asyncio.create_task(self._process_site(channel, site.id, target, semaphore))
			for site in sites
		]

		try:
			await collector
			await asyncio.gather(*workers)
		finally:
			for task in [collector, *workers]:
				if not task.done():
					task.cancel()

		duration = (datetime.now() - start_time).total_seconds()
		logger.info(
			f'Resolved {report.resolved}/{report.sites_total} sites to {target} '
			f'({len(report.rates)} currencies) in {duration:.2f}s'
		)
		return report

	async def _collect(
		self, channel: asyncio.Queue[SiteOutcome], expected: int, report: ConversionReport
	) -> None:
		for _ in range(expected):
			outcome = await channel.get()
			if outcome.succeeded:
				conversion = outcome.conversion
				previous = report.rates.get(conversion.from_currency)
				if previous is not None and previous != conversion.ratio:
					logger.debug(
						f'{conversion.from_currency} already resolved to {previous}, '
						f'replaced by {outcome.site_id} with {conversion.ratio}'
					)
				report.rates[conversion.from_currency] = conversion.ratio
			else:
				report.failures.append(
					SiteFailure(site_id=outcome.site_id, reason=outcome.error or 'unknown error')
				)
			channel.task_done()

	async def _process_site(
		self,
		channel: asyncio.Queue[SiteOutcome],
		site_id: str,
		target_currency: str,
		semaphore: asyncio.Semaphore | None,
	) -> None:
		outcome = await self._resolve_site(site_id, target_currency, semaphore)
		await channel.put(outcome)

	async def _resolve_site(
		self, site_id: str, target_currency: str, semaphore: asyncio.Semaphore | None
	) -> SiteOutcome:
		try:
			if semaphore is None:
				conversion = await self._resolve_with_deadline(site_id, target_currency)
			else:
				async with semaphore:
					conversion = await self._resolve_with_deadline(site_id, target_currency)
			return SiteOutcome(site_id=site_id, conversion=conversion)

		except TimeoutError as e:
			if self.site_timeout is None:
				error = str(e) or e.__class__.__name__
			else:
				error = f'timed out after {self.site_timeout}s'
		except Exception as e:
			error = str(e) or e.__class__.__name__

		logger.warning(f'Site {site_id} dropped: {error}')
		return SiteOutcome(site_id=site_id, error=error)

	async def _resolve_with_deadline(
		self, site_id: str, target_currency: str
	) -> CurrencyConversion:
		resolution = self.resolver.resolve(site_id, target_currency)
		if self.site_timeout is None:
			return await resolution
		return await asyncio.wait_for(resolution, timeout=self.site_timeout)
