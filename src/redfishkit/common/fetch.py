"""Fetching entities and resource collections through a client.

A client is anything with the call shape of RedfishAPI: get(endpoint)
returning a response with the body in .content, and post/patch taking a
JSON-serializable payload. Errors raised by the client propagate as-is.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Iterator, List, Optional, Type, TypeVar

from pydantic import ValidationError

from redfishkit.common.entity import Entity
from redfishkit.common.errors import CollectionError, DecodeError
from redfishkit.common.links import Link, LinkCollection
from redfishkit.common.wire import CollectionPage

LOG = logging.getLogger(__name__)

T = TypeVar('T', bound=Entity)


def get_object(client, uri: str, cls: Type[T]) -> T:
    """GET uri and decode it as cls, attaching client to the result."""
    LOG.debug('GET %s', uri)
    response = client.get(uri)
    entity = cls.from_json(response.content, client=client)
    if not entity.odata_id:
        entity.odata_id = uri
    return entity


def resolve(client, link: Link, cls: Type[T]) -> Optional[T]:
    """
    Fetch the resource a link points at.

    An unset link resolves to None; that means the resource has no such
    linked resource, not that something failed. Nothing is cached: every
    call issues a new GET.
    """
    if not link:
        return None
    return get_object(client, link.uri, cls)


def collect_list(client, link: str) -> Iterator[str]:
    """
    Yield the member URIs of a resource collection, page by page.

    The next page is only requested once every member of the current page
    has been consumed, so members come out in server order.

    Raises:
        DecodeError: If a page is not a valid collection document, or a
            nextLink points back at a page already read
    """
    seen = set()
    uri = link
    while uri:
        if uri in seen:
            raise DecodeError(f'Collection {link} links back to page {uri}')
        seen.add(uri)
        LOG.debug('GET %s', uri)
        response = client.get(uri)
        try:
            page = CollectionPage.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f'Invalid collection page at {uri}: {e}') from e
        for member in page.members:
            if member.odata_id:
                yield member.odata_id
        uri = page.next_link


def _fetch_all(client, uris: Iterable[str], cls: Type[T], source: Optional[str] = None) -> List[T]:
    results = []
    failures = {}
    futures = {}
    with ThreadPoolExecutor(max_workers=getattr(client, 'max_workers', None)) as executor:
        try:
            for uri in uris:
                futures[executor.submit(get_object, client, uri, cls)] = uri
        except Exception as e:
            # Paging stopped; the members already submitted are still collected.
            failures[source] = e

        # Only this thread touches results and failures.
        for future in as_completed(futures):
            uri = futures[future]
            try:
                results.append(future.result())
            except Exception as e:
                LOG.debug('Failed to fetch %s: %s', uri, e)
                failures[uri] = e

    if failures:
        raise CollectionError(failures, results)
    return results


def get_objects(client, uris: Iterable[str], cls: Type[T]) -> List[T]:
    """
    Fetch every resource in uris concurrently.

    Raises:
        CollectionError: If any member failed; carries the members that did not
    """
    return _fetch_all(client, list(uris), cls)


def get_collection_objects(client, link: str, cls: Type[T]) -> List[T]:
    """
    Fetch every member of the resource collection at link.

    Pages are walked in order on the calling thread while members are
    fetched on a thread pool, so results come back in completion order.
    An empty link yields an empty list.

    Raises:
        CollectionError: If a page or any member failed; carries the members that did not
    """
    if not link:
        return []
    return _fetch_all(client, collect_list(client, link), cls, source=link)


def list_links(client, links: LinkCollection, cls: Type[T]) -> List[T]:
    """Resolve a LinkCollection, using its expanded members when the server sent them."""
    if links.links:
        return get_objects(client, links.uris, cls)
    return get_collection_objects(client, links.uri, cls)
