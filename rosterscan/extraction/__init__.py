from rosterscan.extraction.base import BaseRequester
from rosterscan.extraction.factory import RequesterFactory
from rosterscan.extraction.requester import ExtractionRequester

__all__ = ["BaseRequester", "ExtractionRequester", "RequesterFactory"]
