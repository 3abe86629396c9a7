class IGDNotFoundError(Exception):
    """
    No UPnP enabled gateway could be located or described
    """


class RequestError(Exception):
    """
    Base class of every error raised by a gateway action
    """


class TransportError(RequestError):
    """
    The request never produced a response (connection, timeout, bad http)

    error - the underlying transport exception
    """

    def __init__(self, error: Exception):
        super().__init__(str(error))
        self.error = error


class InvalidResponseError(RequestError):
    """
    The gateway answered but not with the expected content

    error_code - UPnP error code if the response was a SOAP fault
    error_description - UPnP error description if the response was a SOAP fault
    """

    def __init__(self, message: str="Invalid response from gateway",
        error_code: str=None,
        error_description: str=None
    ):
        if error_code is not None or error_description is not None:
            details = " ".join(field for field in (error_code, error_description) if field is not None)
            message = "{message}: {details}".format(message=message, details=details)
        super().__init__(message)
        self.error_code = error_code
        self.error_description = error_description
