"""
Classes to facilitate working with the Google Spreadsheets feeds
"""
import xml.etree.ElementTree as ET

# the 'gs' extension elements, gs:rowCount etc
GS_NS = "http://schemas.google.com/spreadsheets/2006"

REL_WORKSHEETS_FEED = "http://schemas.google.com/spreadsheets/2006#worksheetsfeed"
REL_CELLS_FEED = "http://schemas.google.com/spreadsheets/2006#cellsfeed"
REL_LIST_FEED = "http://schemas.google.com/spreadsheets/2006#listfeed"

# every spreadsheet the credentials can see
SPREADSHEETS_FEED_URL = "https://spreadsheets.google.com/feeds/spreadsheets/private/full"

ATOM_CONTENT_TYPE = "application/atom+xml"

# so entries we build serialize as gs:rowCount and not ns0:rowCount
ET.register_namespace("gs", GS_NS)
