import xml.etree.ElementTree as ET

from ..access import ServiceRequest, Request
from ..resources import ATOM_NS, get_service
from .worksheet import Worksheet, WorksheetFeed
from . import GS_NS, ATOM_CONTENT_TYPE

def get_feed(url: str, service: ServiceRequest|None = None) -> bytes:
    """
    GET a feed and hand back the raw body.
    """
    s = get_service(service)
    s.request.full_url = url
    return s.execute()

def post_entry(url: str, entry: ET.Element|str,
               service: ServiceRequest|None = None) -> bytes:
    """
    POST an Atom entry to a feed, which is how the feeds API creates things.
    Returns the raw body, normally the created entry.
    """
    body = entry if isinstance(entry, str) else ET.tostring(entry, encoding="unicode",
                                                            default_namespace=ATOM_NS)
    s = get_service(service)
    s.request.full_url = url
    s.request.method = Request.POST
    s.request.post = body
    s.request.headers = {'Content-Type': ATOM_CONTENT_TYPE}
    return s.execute()

def _count(name: str, value: int|str) -> int:
    """
    A worksheet dimension, an int or a string of digits and at least 1.
    Anything else (floats, bools) is refused rather than truncated.
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Invalid worksheet {name}: {value!r}")
    if isinstance(value, str):
        if not value.strip().isdecimal():
            raise ValueError(f"Invalid worksheet {name}: {value!r}")
        value = int(value)
    if value < 1:
        raise ValueError(f"Invalid worksheet {name}: {value!r}")
    return value

def worksheet_entry(title: str, rowCount: int = 100, colCount: int = 10) -> ET.Element:
    """
    The entry for a new worksheet:

    <entry xmlns="http://www.w3.org/2005/Atom" xmlns:gs="http://schemas.google.com/spreadsheets/2006">
        <title>title</title>
        <gs:rowCount>100</gs:rowCount>
        <gs:colCount>10</gs:colCount>
    </entry>
    """
    rows = _count("rowCount", rowCount)
    cols = _count("colCount", colCount)
    entry = ET.Element(f"{{{ATOM_NS}}}entry")
    ET.SubElement(entry, f"{{{ATOM_NS}}}title").text = str(title)
    ET.SubElement(entry, f"{{{GS_NS}}}rowCount").text = str(rows)
    ET.SubElement(entry, f"{{{GS_NS}}}colCount").text = str(cols)
    return entry

def get_worksheets(url: str, service: ServiceRequest|None = None) -> WorksheetFeed:
    """
    Wrapper for listing the worksheets feed of a spreadsheet.
    url is the spreadsheet's worksheets feed link.
    """
    return WorksheetFeed(get_feed(url, service), service)

def add_worksheet(url: str, title: str,
                  rowCount: int = 100, colCount: int = 10,
                  service: ServiceRequest|None = None) -> Worksheet:
    """
    Wrapper for adding a worksheet, POSTing a new entry to the worksheets feed.
    Every call adds another worksheet, even with the same title.
    """
    entry = worksheet_entry(title, rowCount, colCount)
    return Worksheet(post_entry(url, entry, service), service)
