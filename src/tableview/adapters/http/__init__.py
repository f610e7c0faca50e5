"""HTTP adapter – httpx client and remote page fetcher."""
from tableview.adapters.http.client import HttpxHttpClient
from tableview.adapters.http.fetcher import CollectionEndpoint, RemotePageFetcher

__all__ = ["CollectionEndpoint", "HttpxHttpClient", "RemotePageFetcher"]
