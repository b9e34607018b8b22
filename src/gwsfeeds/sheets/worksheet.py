from ..resources import GoogleFeedsResourceBase, GoogleFeedsFeedBase
from ..exceptions import ParseError
from . import GS_NS, REL_CELLS_FEED, REL_LIST_FEED

class Worksheet(GoogleFeedsResourceBase):
    """
    A single worksheet, a tab in the spreadsheet.  Built from the body that
    comes back when listing or adding worksheets.
    """
    def _count(self, tag: str) -> int:
        s = self.text(tag, GS_NS).strip()
        try:
            return int(s)
        except ValueError as e:
            raise ParseError(f"Invalid gs:{tag} value: {s}") from e

    @property
    def row_count(self) -> int:
        return self._count("rowCount")

    @property
    def col_count(self) -> int:
        return self._count("colCount")

    @property
    def dimensions(self) -> tuple[int,int]:
        return (self.row_count, self.col_count)

    @property
    def cells_feed_url(self) -> str:
        return self.link_href(REL_CELLS_FEED)

    @property
    def list_feed_url(self) -> str:
        return self.link_href(REL_LIST_FEED)

class WorksheetFeed(GoogleFeedsFeedBase):
    """
    All the worksheets of a spreadsheet.
    """
    entry_class = Worksheet
