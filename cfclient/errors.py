#
# Copyright (c) 2016 Intel Corporation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
Errors raised by the client. Every one of them reaches the caller through the failure channel
of a `cfclient.deferred.Deferred`.
"""


class CfClientError(Exception):
    """
    Base class for all the errors of this library.
    """
    pass


class ValidationError(CfClientError):
    """A request object failed its self-check. Raised before any network I/O.

    Attributes:
        messages (list[str]): Every violation found in the request.
    """

    def __init__(self, messages):
        super().__init__('Request is invalid: {}'.format(', '.join(messages)))
        self.messages = list(messages)


class TransportError(CfClientError):
    """Connection to the server couldn't be carried out.

    Attributes:
        cause (Exception): The underlying transport exception.
    """

    def __init__(self, cause):
        super().__init__('Transport failure: {}'.format(cause))
        self.cause = cause


class DecodeError(CfClientError):
    """Response body didn't match the shape of the declared response type.

    Attributes:
        cause (Exception): What went wrong during decoding.
        body (str): Body of the response, decoded to text.
    """

    def __init__(self, cause, body=None):
        super().__init__('Malformed response: {}'.format(cause))
        self.cause = cause
        self.body = body


class ApiError(CfClientError):
    """Server responded with a non-success status.

    Attributes:
        status_code (int): HTTP status code of the response.
        error (str): Error name (e.g. "invalid_token" or "CF-AppNotFound").
        error_description (str): Human-readable description of the error.
        code (int): Numeric error code from the payload, if the server sent one.
    """

    def __init__(self, status_code, error, error_description, code=None):
        if error_description is None:
            super().__init__(error)
        else:
            super().__init__('{}: {}'.format(error, error_description))
        self.status_code = status_code
        self.error = error
        self.error_description = error_description
        self.code = code

    @classmethod
    def from_payload(cls, status_code, payload, reason=None):
        """Builds the error out of one of the error envelopes used by the platform.
        UAA sends "error" and "error_description", Cloud Controller sends "code", "description"
        and "error_code".

        Args:
            status_code (int): HTTP status code of the response.
            payload (dict): Decoded error body. Can be None if the body wasn't JSON.
            reason (str): HTTP reason phrase, used when the payload has no error name.

        Returns:
            `ApiError`: Instance of the class this was called on.
        """
        payload = payload if isinstance(payload, dict) else {}
        error = payload.get('error') or payload.get('error_code') or reason
        description = payload.get('error_description') or payload.get('description')
        return cls(status_code, error, description, code=payload.get('code'))


class ClientV2Error(ApiError):
    """
    Error returned by the v2 Cloud Controller API.
    """
    pass


class UaaError(ApiError):
    """
    Error returned by the UAA API.
    """
    pass


class JobFailedError(ClientV2Error):
    """
    An asynchronous Cloud Controller job ended with "failed" status.
    """
    pass


class JobTimeoutError(CfClientError):
    """
    An asynchronous Cloud Controller job didn't finish in the given time.
    """
    pass


class ConfigurationError(CfClientError):
    """
    Connection configuration is malformed or incomplete.
    """
    pass


class TokenError(CfClientError):
    """
    Access token couldn't be obtained.
    """
    pass
