"""
Base classes for the Atom documents the feeds API talks in.
A resource is just a read-only view over a parsed xml element, every
accessor goes back to the element when called so nothing is cached and a
malformed document only fails when the missing piece is asked for.
"""
from typing import Self, ClassVar
from collections.abc import Iterator
import datetime
import xml.etree.ElementTree as ET

from . import access
from .access import ServiceRequest
from .exceptions import ParseError, MissingFieldError, LinkNotFoundError

ATOM_NS = "http://www.w3.org/2005/Atom"

def parse_xml(xml: str|bytes) -> ET.Element:
    """
    Parse a raw response body into an element.
    """
    try:
        return ET.fromstring(xml)
    except ET.ParseError as e:
        raise ParseError(f"Invalid xml: {e}") from e

def get_service(service: ServiceRequest|None = None) -> ServiceRequest:
    """
    The service to execute with, the module singleton if none given.
    """
    # ServiceRequest is falsy without credentials so no 'or' here
    return access.service_request if service is None else service

class GoogleFeedsResourceBase():
    """
    Wraps a single xml element, either parsed from a string or handed over
    already parsed (feeds do this for each of their entries).
    The service is kept so anything fetched from this resource goes through
    the same one.
    """
    def __init__(self, xml: str|bytes|ET.Element,
                 service: ServiceRequest|None = None) -> None:
        if isinstance(xml, (str, bytes)):
            self._xml = parse_xml(xml)
        elif isinstance(xml, ET.Element):
            self._xml = xml
        else:
            raise ValueError(f"Can't make a {self.__class__.__name__} from {type(xml)}")
        self._service = service

    @classmethod
    def from_string(cls, xml: str|bytes, service: ServiceRequest|None = None) -> Self:
        return cls(parse_xml(xml), service)

    @classmethod
    def from_element(cls, xml: ET.Element, service: ServiceRequest|None = None) -> Self:
        return cls(xml, service)

    def __str__(self) -> str:
        try:
            return f"{self.id}:{self.title}"
        except MissingFieldError:
            return "<malformed>"

    def __repr__(self) -> str:
        return f"{self.__class__}:{str(self)}"

    @property
    def xml(self) -> ET.Element:
        return self._xml

    @property
    def service(self) -> ServiceRequest:
        return get_service(self._service)

    def find(self, tag: str, ns: str = ATOM_NS) -> ET.Element|None:
        """
        First child element with the tag, namespaced or not.
        """
        els = self.findall(tag, ns)
        return els[0] if els else None

    def findall(self, tag: str, ns: str = ATOM_NS) -> list[ET.Element]:
        """
        Child elements with the tag, namespaced or not, in document order.
        """
        tags = (f"{{{ns}}}{tag}", tag)
        return [el for el in self._xml if el.tag in tags]

    def text(self, tag: str, ns: str = ATOM_NS) -> str:
        """
        Text of the child element, '' if it is empty.
        """
        el = self.find(tag, ns)
        if el is None:
            raise MissingFieldError(f"No <{tag}> element in {self.__class__.__name__}")
        return el.text or ""

    def link_href(self, rel: str) -> str:
        """
        href of the first link with the rel, in document order.
        """
        for link in self.findall("link"):
            if link.get("rel") == rel:
                href = link.get("href")
                if href is None:
                    raise LinkNotFoundError(f"Link with rel {rel} has no href in {self.__class__.__name__}")
                return href
        raise LinkNotFoundError(f"No link with rel {rel} in {self.__class__.__name__}")

    @property
    def id(self) -> str:
        """
        The id element is a full url, this is just the last part of it.
        """
        url = self.text("id").strip()
        return url[url.rfind("/") + 1:]

    @property
    def title(self) -> str:
        """
        Title as is, surrounding whitespace included.
        """
        return self.text("title")

    @property
    def updated(self) -> datetime.datetime:
        s = self.text("updated").strip()
        try:
            return datetime.datetime.fromisoformat(s)
        except ValueError as e:
            raise ParseError(f"Invalid updated timestamp: {s}") from e

class GoogleFeedsFeedBase(GoogleFeedsResourceBase):
    """
    An Atom feed, a list of entries all of the entry_class type.
    Subclasses just set entry_class.
    """
    entry_class: ClassVar[type[GoogleFeedsResourceBase]] = GoogleFeedsResourceBase

    def __len__(self) -> int:
        return len(self.findall("entry"))

    def __iter__(self) -> Iterator[GoogleFeedsResourceBase]:
        for e in self.findall("entry"):
            yield self.entry_class.from_element(e, self._service)

    def __getitem__(self, item: int) -> GoogleFeedsResourceBase:
        return self.entries[item]

    @property
    def entries(self) -> list[GoogleFeedsResourceBase]:
        return list(self)

    def get_by_title(self, title: str) -> GoogleFeedsResourceBase|None:
        """
        First entry with exactly this title, or None.
        """
        for e in self:
            if e.title == title:
                return e
        return None
