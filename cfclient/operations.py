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
Generic request executor that all the resource operations delegate to.
"""

import logging

import requests

from .deferred import Deferred
from .errors import ApiError, DecodeError, TransportError
from .uri import UriBuilder
from .validation import check

_log = logging.getLogger(__name__) # pylint: disable=invalid-name

_BODY_METHODS = ('POST', 'PUT')


class AbstractOperations:
    """Base for classes implementing the operations of a single API resource.

    Every operation is carried out in the same order: the request is validated, the URI is built,
    the HTTP exchange is made and the response is deserialized. All of it happens on the
    executor, the caller gets a `cfclient.deferred.Deferred`.
    """

    # Type of errors raised for non-success responses.
    error_type = ApiError

    def __init__(self, session, root, executor):
        """
        Args:
            session (`requests.Session`): Session used to talk to the server. It has the
                authentication and TLS settings.
            root (str): Root URI of the server, e.g. "https://api.run.pivotal.io".
            executor (`concurrent.futures.Executor`): Executor the requests are run on.
        """
        self._session = session
        self._root = root
        self._executor = executor

    @property
    def root(self):
        return self._root

    def __repr__(self):
        return '{}(root={})'.format(self.__class__.__name__, self._root)

    def _get(self, request, response_type, uri_transformer):
        return self._exchange('GET', request, response_type, uri_transformer)

    def _post(self, request, response_type, uri_transformer):
        return self._exchange('POST', request, response_type, uri_transformer)

    def _put(self, request, response_type, uri_transformer):
        return self._exchange('PUT', request, response_type, uri_transformer)

    def _delete(self, request, response_type, uri_transformer):
        return self._exchange('DELETE', request, response_type, uri_transformer)

    def _exchange(self, method, request, response_type, uri_transformer):
        """
        Args:
            method (str): HTTP method.
            request (`cfclient.model.Model`): Request object.
            response_type (type): `cfclient.model.Model` subclass the response body is
                deserialized into. None if the response has no body.
            uri_transformer (callable): Function taking a `cfclient.uri.UriBuilder`, adding the
                path segments and query parameters of the operation to it.

        Returns:
            `cfclient.deferred.Deferred`: Response object (or None) of the operation.
        """
        def _work(exchange):
            check(request)
            builder = UriBuilder(self._root)
            uri_transformer(builder)
            body = None
            if method in _BODY_METHODS:
                body = request.to_body() if request is not None else {}
            return self._send(exchange, method, builder.build(), body, response_type)

        return Deferred.submit(self._executor, _work)

    def _send(self, exchange, method, uri, body, response_type): # pylint: disable=too-many-arguments
        _log.debug('%s %s', method, uri)
        try:
            response = self._session.request(method, uri, json=body, stream=True)
        except requests.RequestException as ex:
            raise TransportError(ex) from ex

        if not exchange.attach(response):
            _log.debug('%s %s cancelled before reading the response', method, uri)
            return None
        try:
            return self._read(exchange, response, response_type, method, uri)
        finally:
            exchange.detach()

    def _read(self, exchange, response, response_type, method, uri): # pylint: disable=too-many-arguments
        try:
            content = response.content
        except requests.RequestException as ex:
            if exchange.cancelled:
                return None
            raise TransportError(ex) from ex
        if exchange.cancelled:
            _log.debug('%s %s cancelled, response discarded', method, uri)
            return None

        _log.debug('%s %s responded with %s (%s bytes)', method, uri, response.status_code,
                   len(content))
        if not 200 <= response.status_code < 300:
            raise self._error(response)
        if response_type is None:
            return None

        try:
            return response_type.from_json(response.json())
        except (ValueError, TypeError, KeyError, AttributeError) as ex:
            raise DecodeError(ex, response.text) from ex

    def _error(self, response):
        try:
            payload = response.json()
        except ValueError:
            return self.error_type(response.status_code, response.reason, response.text or None)
        return self.error_type.from_payload(response.status_code, payload, response.reason)
