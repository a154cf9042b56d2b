from pydantic import BaseModel, ConfigDict, TypeAdapter


class SiteSummaryPayload(BaseModel):
	model_config = ConfigDict(extra='ignore', frozen=True)

	id: str
	name: str


class SitePayload(BaseModel):
	model_config = ConfigDict(extra='ignore', frozen=True)

	id: str
	name: str
	country_id: str
	default_currency_id: str


class CurrencyConversionPayload(BaseModel):
	"""Only the ratio is read; the currency fields the API echoes back are ignored."""

	model_config = ConfigDict(extra='ignore', frozen=True)

	ratio: float


SiteListPayload = TypeAdapter(list[SiteSummaryPayload])
