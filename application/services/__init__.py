from .aggregator import ConversionAggregator
from .conversion_resolver import ConversionResolver
from .service_factory import ServiceFactory

__all__ = ['ConversionAggregator', 'ConversionResolver', 'ServiceFactory']
