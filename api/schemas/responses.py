from pydantic import BaseModel, ConfigDict, Field


class DroppedSiteResponse(BaseModel):
	site_id: str = Field(..., description='Site that could not be resolved')
	reason: str = Field(..., description='Why the site was dropped')


class ConversionTableResponse(BaseModel):
	reference_currency: str = Field(..., description='Currency every ratio converts to')
	rates: dict[str, float] = Field(..., description='Site default currency -> ratio')
	sites_total: int = Field(..., description='Sites returned by the marketplace')
	sites_resolved: int = Field(..., description='Sites whose conversion succeeded')
	dropped_sites: list[DroppedSiteResponse] = Field(default_factory=list)

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'reference_currency': 'USD',
				'rates': {'ARS': 0.0025, 'BRL': 0.2},
				'sites_total': 3,
				'sites_resolved': 2,
				'dropped_sites': [{'site_id': 'MCU', 'reason': 'Marketplace HTTP error 404'}],
			}
		}
	)


class SiteResponse(BaseModel):
	id: str = Field(..., description='Site id, e.g. MLA')
	name: str = Field(..., description='Site name')


class SitesResponse(BaseModel):
	sites: list[SiteResponse] = Field(description='Sites the marketplace operates')

	model_config = ConfigDict(
		json_schema_extra={'examples': [{'sites': [{'id': 'MLA', 'name': 'Argentina'}]}]}
	)
