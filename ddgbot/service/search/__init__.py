from .errors import (
    AnchorNotFound,
    DeserializationError,
    ExtractionError,
    HrefMissing,
    ResultContainerNotFound,
    SearchError,
    SnippetNotFound,
    TitleMissing,
    TransportError,
)
from .formatter import RenderedResult, render_outcome
from .instant import InstantAnswerClient
from .models import NoResult, ScrapedResult, SearchOutcome, StructuredAnswer
from .scraper import ScrapeResolver, extract_first_result
from .service import SearchFacade, SearchPipeline

__all__ = [
    'SearchFacade', 'SearchPipeline', 'InstantAnswerClient', 'ScrapeResolver',
    'extract_first_result', 'RenderedResult', 'render_outcome',
    'StructuredAnswer', 'ScrapedResult', 'NoResult', 'SearchOutcome',
    'SearchError', 'TransportError', 'DeserializationError', 'ExtractionError',
    'ResultContainerNotFound', 'AnchorNotFound', 'HrefMissing', 'TitleMissing',
    'SnippetNotFound',
]
