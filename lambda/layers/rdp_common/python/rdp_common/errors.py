"""
Errors that end a binary stream invocation.

Every error is raised once and becomes the invocation's outcome; nothing here
is retried.
"""

from typing import Optional


class BinaryStreamError(Exception):
    """Base class for failures of a single invocation"""


class MissingConfiguration(BinaryStreamError):
    """A required environment variable is absent or empty"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unable to locate environment variable {key}")


class InvalidTriggerEvent(BinaryStreamError):
    """The event does not describe an uploaded object"""


class TransportError(BinaryStreamError):
    """The connection to the RDP API failed"""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Error while calling REST API: {detail}")


class UnsuccessfulResponse(BinaryStreamError):
    """The RDP API answered, but did not confirm the object was created"""

    MESSAGE = "Fail to make REST api call to post the binary stream object."

    def __init__(self, status_code: Optional[int] = None, body: str = ''):
        self.status_code = status_code
        self.body = body
        super().__init__(self.MESSAGE)
