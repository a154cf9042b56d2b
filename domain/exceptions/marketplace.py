class MarketplaceException(Exception):
	pass


class FetchError(MarketplaceException):
	"""A marketplace call failed: transport, non-2xx status or unreadable body."""

	def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
		super().__init__(message)
		self.url = url
		self.status_code = status_code


class DecodeError(FetchError):
	pass
