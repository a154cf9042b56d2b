from dataclasses import dataclass, field

ConversionTable = dict[str, float]


@dataclass(frozen=True)
class SiteSummary:
	id: str
	name: str


@dataclass(frozen=True)
class Site:
	id: str
	name: str
	country_id: str
	default_currency_id: str


@dataclass(frozen=True)
class CurrencyConversion:
	from_currency: str
	to_currency: str
	ratio: float


@dataclass(frozen=True)
class SiteOutcome:
	"""The single message a resolver task sends to the collector.

	``conversion`` is None when the site could not be resolved; ``error`` then
	says why.
	"""

	site_id: str
	conversion: CurrencyConversion | None = None
	error: str | None = None

	@property
	def succeeded(self) -> bool:
		return self.conversion is not None


@dataclass(frozen=True)
class SiteFailure:
	site_id: str
	reason: str


@dataclass
class ConversionReport:
	reference_currency: str
	rates: ConversionTable = field(default_factory=dict)
	failures: list[SiteFailure] = field(default_factory=list)
	sites_total: int = 0

	@property
	def resolved(self) -> int:
		return self.sites_total - len(self.failures)
