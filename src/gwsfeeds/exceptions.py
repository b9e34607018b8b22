"""
Error kinds raised by gwsfeeds.
Everything derives from GWSFeedsError so a caller can catch the lot, but each
also derives from the builtin a caller would naturally expect (ValueError for
bad input, KeyError for a missing field, RuntimeError for transport).
"""

class GWSFeedsError(Exception):
    pass

class ParseError(GWSFeedsError, ValueError):
    """Malformed XML or a field value that can't be converted"""
    pass

class MissingFieldError(GWSFeedsError, KeyError):
    """An expected element is not present in the entry"""
    pass

class LinkNotFoundError(MissingFieldError):
    """No link element carries the requested rel"""
    pass

class TransportError(GWSFeedsError, RuntimeError):
    """
    The request could not be completed.  If a response came back status_code
    and body are filled in, otherwise they are None.
    """
    def __init__(self, message: str,
                 status_code: int|None = None,
                 body: str|None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
