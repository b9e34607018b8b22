from ..access import ServiceRequest
from ..resources import GoogleFeedsResourceBase, GoogleFeedsFeedBase
from .worksheet import Worksheet, WorksheetFeed
from . import ops
from . import REL_WORKSHEETS_FEED, SPREADSHEETS_FEED_URL

class Spreadsheet(GoogleFeedsResourceBase):
    """
    Represents a single spreadsheet, one entry from the spreadsheets feed.
    Make one from the raw entry xml or from an already parsed entry element:

        ss = Spreadsheet(body)
        ss = Spreadsheet.from_element(entry)

    The accessors (id, title, updated, worksheets_feed_url) read the xml each
    time.  get_worksheets() and add_worksheet() each make one request through
    the service.
    """

    @property
    def worksheets_feed_url(self) -> str:
        return self.link_href(REL_WORKSHEETS_FEED)

    def get_worksheets(self) -> WorksheetFeed:
        """
        All the worksheets which belong to this spreadsheet
        """
        return ops.get_worksheets(self.worksheets_feed_url, self._service)

    def add_worksheet(self, title: str, rowCount: int = 100, colCount: int = 10) -> Worksheet:
        """
        Add a new worksheet to this spreadsheet.
        Not idempotent, calling twice makes two worksheets.
        """
        return ops.add_worksheet(self.worksheets_feed_url, title,
                                 rowCount, colCount, self._service)

class SpreadsheetFeed(GoogleFeedsFeedBase):
    """
    The list of spreadsheets visible to the service credentials.
    """
    entry_class = Spreadsheet

def get_spreadsheets(service: ServiceRequest|None = None) -> SpreadsheetFeed:
    """
    Wrapper for listing the spreadsheets feed.
    This is the entry point, get a Spreadsheet from here then go after its worksheets.
    """
    return SpreadsheetFeed(ops.get_feed(SPREADSHEETS_FEED_URL, service), service)
