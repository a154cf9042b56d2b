import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.marketplace import FetchError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(FetchError)
	async def fetch_error_handler(request: Request, exc: FetchError):
		logger.error(f'Marketplace error: {exc}')
		return JSONResponse(
			status_code=503, content={'detail': 'Marketplace API unavailable'}
		)
