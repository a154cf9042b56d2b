from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_aggregator, get_site_repository
from api.schemas import ConversionTableResponse, DroppedSiteResponse, SiteResponse, SitesResponse
from application.services import ConversionAggregator
from infrastructure.repositories.site import SiteRepository

router = APIRouter(prefix='/api', tags=['conversions'])


@router.get(
	'/conversions',
	response_model=ConversionTableResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert every site default currency to one currency',
)
async def get_conversions(
	aggregator: Annotated[ConversionAggregator, Depends(get_aggregator)],
	to: Annotated[
		str | None,
		Query(
			min_length=3,
			max_length=5,
			pattern=r'^[A-Za-z]{3,5}$',
			description='Target currency, defaults to the configured reference currency',
		),
	] = None,
) -> ConversionTableResponse:
	report = await aggregator.aggregate(to.upper() if to else None)
	return ConversionTableResponse(
		reference_currency=report.reference_currency,
		rates=report.rates,
		sites_total=report.sites_total,
		sites_resolved=report.resolved,
		dropped_sites=[
			DroppedSiteResponse(site_id=f.site_id, reason=f.reason) for f in report.failures
		],
	)


@router.get(
	'/sites',
	response_model=SitesResponse,
	status_code=status.HTTP_200_OK,
	summary='List marketplace sites',
)
async def list_sites(
	repository: Annotated[SiteRepository, Depends(get_site_repository)],
) -> SitesResponse:
	sites = await repository.list_sites()
	return SitesResponse(sites=[SiteResponse(id=s.id, name=s.name) for s in sites])
