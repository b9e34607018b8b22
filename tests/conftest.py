import pytest

from gwsfeeds.access import Request

SPREADSHEET_ENTRY = """<entry xmlns="http://www.w3.org/2005/Atom">
    <id>https://spreadsheets.google.com/feeds/spreadsheets/private/full/abc123</id>
    <updated>2013-02-10T10:13:46.123Z</updated>
    <category scheme="http://schemas.google.com/spreadsheets/2006" term="http://schemas.google.com/spreadsheets/2006#spreadsheet"/>
    <title type="text">Budget</title>
    <content type="text">Budget</content>
    <link rel="http://schemas.google.com/spreadsheets/2006#worksheetsfeed" type="application/atom+xml" href="https://spreadsheets.google.com/feeds/worksheets/abc123/private/full"/>
    <link rel="alternate" type="text/html" href="https://docs.google.com/spreadsheets/d/abc123/edit"/>
    <link rel="self" type="application/atom+xml" href="https://spreadsheets.google.com/feeds/spreadsheets/private/full/abc123"/>
</entry>"""

WORKSHEET_ENTRY = """<entry xmlns="http://www.w3.org/2005/Atom" xmlns:gs="http://schemas.google.com/spreadsheets/2006">
    <id>https://spreadsheets.google.com/feeds/worksheets/abc123/private/full/od6</id>
    <updated>2013-02-11T08:00:00.000Z</updated>
    <title type="text">Sheet1</title>
    <link rel="http://schemas.google.com/spreadsheets/2006#listfeed" type="application/atom+xml" href="https://spreadsheets.google.com/feeds/list/abc123/od6/private/full"/>
    <link rel="http://schemas.google.com/spreadsheets/2006#cellsfeed" type="application/atom+xml" href="https://spreadsheets.google.com/feeds/cells/abc123/od6/private/full"/>
    <gs:rowCount>100</gs:rowCount>
    <gs:colCount>10</gs:colCount>
</entry>"""

WORKSHEET_FEED = """<feed xmlns="http://www.w3.org/2005/Atom" xmlns:gs="http://schemas.google.com/spreadsheets/2006">
    <id>https://spreadsheets.google.com/feeds/worksheets/abc123/private/full</id>
    <updated>2013-02-11T08:00:00.000Z</updated>
    <title type="text">Budget</title>
    <entry>
        <id>https://spreadsheets.google.com/feeds/worksheets/abc123/private/full/od6</id>
        <updated>2013-02-11T08:00:00.000Z</updated>
        <title type="text">Sheet1</title>
        <gs:rowCount>100</gs:rowCount>
        <gs:colCount>10</gs:colCount>
    </entry>
    <entry>
        <id>https://spreadsheets.google.com/feeds/worksheets/abc123/private/full/od7</id>
        <updated>2013-02-12T09:30:00.000Z</updated>
        <title type="text">Totals</title>
        <gs:rowCount>20</gs:rowCount>
        <gs:colCount>4</gs:colCount>
    </entry>
</feed>"""

SPREADSHEET_FEED = """<feed xmlns="http://www.w3.org/2005/Atom">
    <id>https://spreadsheets.google.com/feeds/spreadsheets/private/full</id>
    <updated>2013-02-11T08:00:00.000Z</updated>
    <title type="text">Available Spreadsheets</title>
    <entry>
        <id>https://spreadsheets.google.com/feeds/spreadsheets/private/full/abc123</id>
        <updated>2013-02-10T10:13:46.123Z</updated>
        <title type="text">Budget</title>
        <link rel="http://schemas.google.com/spreadsheets/2006#worksheetsfeed" href="https://spreadsheets.google.com/feeds/worksheets/abc123/private/full"/>
    </entry>
    <entry>
        <id>https://spreadsheets.google.com/feeds/spreadsheets/private/full/def456</id>
        <updated>2013-01-01T00:00:00.000Z</updated>
        <title type="text">Inventory</title>
        <link rel="http://schemas.google.com/spreadsheets/2006#worksheetsfeed" href="https://spreadsheets.google.com/feeds/worksheets/def456/private/full"/>
    </entry>
</feed>"""

class FakeServiceRequest():
    """
    Stands in for ServiceRequest, records each executed request and
    returns the queued bodies in order.
    """
    def __init__(self, *bodies: str) -> None:
        self.bodies = list(bodies)
        self.executed = []
        self.request = Request()

    def execute(self) -> str:
        self.executed.append(self.request)
        self.request = Request()
        return self.bodies.pop(0)

@pytest.fixture
def fake_service():
    def _make(*bodies):
        return FakeServiceRequest(*bodies)
    return _make

@pytest.fixture
def spreadsheet_xml():
    return SPREADSHEET_ENTRY

@pytest.fixture
def worksheet_xml():
    return WORKSHEET_ENTRY

@pytest.fixture
def worksheet_feed_xml():
    return WORKSHEET_FEED

@pytest.fixture
def spreadsheet_feed_xml():
    return SPREADSHEET_FEED
