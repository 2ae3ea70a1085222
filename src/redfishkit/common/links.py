from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from redfishkit.common.wire import ODataCollectionRef, ODataLink


@dataclass(frozen=True)
class Link:
    """
    Reference to another resource by URI.

    An empty URI means the resource has no such link. Links are never
    mutated; following one always means fetching it.
    """
    uri: str = ''

    @classmethod
    def from_wire(cls, ref: Optional[ODataLink]) -> 'Link':
        if ref is None:
            return cls()
        return cls(ref.odata_id or '')

    def __bool__(self):
        return bool(self.uri)

    def __str__(self):
        return self.uri


@dataclass(frozen=True)
class LinkCollection:
    """
    An ordered set of links to resources of one type.

    count is the server-declared size, which can be larger than the number
    of links actually present when the server did not expand them all.
    uri is the collection endpoint, set when the reference points at a
    resource collection that has to be paged through.
    """
    links: Tuple[Link, ...] = ()
    count: Optional[int] = None
    uri: str = ''

    @classmethod
    def from_links(cls, refs: Optional[Iterable[ODataLink]], count: Optional[int] = None) -> 'LinkCollection':
        links = tuple(Link.from_wire(ref) for ref in (refs or []))
        return cls(links=tuple(link for link in links if link), count=count)

    @classmethod
    def from_collection(cls, ref: Optional[ODataCollectionRef]) -> 'LinkCollection':
        if ref is None:
            return cls()
        collection = cls.from_links(ref.members, ref.members_count)
        return cls(links=collection.links, count=collection.count, uri=ref.odata_id or '')

    @property
    def uris(self) -> Tuple[str, ...]:
        return tuple(link.uri for link in self.links)

    def __iter__(self):
        return iter(self.links)

    def __len__(self):
        return len(self.links)

    def __bool__(self):
        return bool(self.links) or bool(self.uri)
