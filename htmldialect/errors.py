"""
errors - exceptions raised by htmldialect

Only structural violations raise. Lenient inputs (empty tag names, empty tag
rules, removing something that is not there) are ignored silently.
"""


class InvalidOperation(ValueError):
    """
    InvalidOperation - the tree can not be changed this way, eg. adding a
        child to a void element or creating a circular structure
    """


class NotFound(LookupError):
    """
    NotFound - no dialect profile is registered under the requested name
    """
