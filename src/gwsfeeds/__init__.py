"""
A small wrapper around the legacy Google Spreadsheets feeds (the Atom/XML API).
The goal is to keep the xml out of the caller's way, the Atom entries are
wrapped in classes with plain accessors for the fields and methods for the
few requests that hang off them.

Requests go through access.service_request unless a ServiceRequest is passed
explicitly.  Authorization is just a google-auth credentials object set on it.
"""
