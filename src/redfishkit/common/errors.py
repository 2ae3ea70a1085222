import json


class RedfishError(Exception):
    """
    Base class for errors raised by redfishkit.
    """

    pass


class DecodeError(RedfishError):
    """
    Raised when a payload is not valid JSON or does not match the resource shape.
    """

    pass


class TransportError(RedfishError):
    """
    Raised when the HTTP exchange with the Redfish service fails.

    status_code is None when no response was received at all.
    """

    def __init__(self, message: str, status_code=None, extended_info=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.extended_info = extended_info or []

    @classmethod
    def from_response(cls, method: str, endpoint: str, response) -> 'TransportError':
        """Build an error from a failed response, using the Redfish error body if any."""
        message = response.reason or 'request failed'
        extended_info = []
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get('error'), dict):
            error = body['error']
            message = error.get('message') or message
            extended_info = error.get('@Message.ExtendedInfo') or []
        return cls(
            f'{method.upper()} {endpoint} returned {response.status_code}: {message}',
            status_code=response.status_code,
            extended_info=extended_info,
        )


class UnsupportedActionError(RedfishError):
    """
    Raised when an action is invoked on a resource that does not expose its target.
    """

    def __init__(self, action: str):
        super().__init__(f"Action '{action}' is not supported by this resource")
        self.action = action


class CollectionError(RedfishError):
    """
    Aggregates per-member failures of a multi-resource fetch.

    The members that were fetched successfully are kept in results, so a
    caller catching this error still has the partial collection.
    """

    def __init__(self, failures=None, results=None):
        self.failures = dict(failures or {})
        self.results = list(results or [])
        super().__init__(str(self))

    def empty(self) -> bool:
        return not self.failures

    def __str__(self):
        details = {uri: str(err) for uri, err in self.failures.items()}
        return f'failed to retrieve some items: {json.dumps(details)}'
