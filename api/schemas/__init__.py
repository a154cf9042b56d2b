from .responses import ConversionTableResponse, DroppedSiteResponse, SiteResponse, SitesResponse

__all__ = [
	'ConversionTableResponse',
	'DroppedSiteResponse',
	'SiteResponse',
	'SitesResponse',
]
