class LiveActivityException(Exception):
    pass


class BadPayloadException(LiveActivityException):
    pass


class EncodingFailure(BadPayloadException):
    """A caller-supplied value in the payload could not be encoded as JSON."""
