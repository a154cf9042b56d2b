from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	MARKETPLACE_BASE_URL: str = 'https://api.mercadolibre.com'

	# Currency every site's default currency is converted to
	REFERENCE_CURRENCY: str = Field('USD', pattern=r'^[A-Za-z]{3,5}$')

	REQUEST_TIMEOUT_SECONDS: float = Field(10.0, gt=0)
	# Deadline for one site's whole resolution; '', 'none' or '0' waits forever
	SITE_TIMEOUT_SECONDS: float | None = 30.0
	# None runs every site at once, 1 resolves sites one at a time
	MAX_CONCURRENCY: int | None = None
	RESULT_BUFFER_SIZE: int = Field(1, ge=1)

	# Application
	APP_NAME: str = 'Marketplace Currency Aggregator'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')

	@field_validator('REFERENCE_CURRENCY')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.upper()

	@field_validator('SITE_TIMEOUT_SECONDS', mode='before')
	@classmethod
	def disabled_timeout(cls, v):
		if isinstance(v, str) and v.strip().lower() in {'', 'none', 'null', '0'}:
			return None
		return v

	@field_validator('SITE_TIMEOUT_SECONDS', 'MAX_CONCURRENCY')
	@classmethod
	def positive_when_set(cls, v):
		if v is not None and v <= 0:
			raise ValueError('must be positive when set')
		return v

	@field_validator('LOG_LEVEL')
	@classmethod
	def known_log_level(cls, v: str):
		level = v.upper()
		if level not in {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}:
			raise ValueError(f'Unknown log level: {v}')
		return level


@lru_cache
def get_settings() -> Settings:
	return Settings()
