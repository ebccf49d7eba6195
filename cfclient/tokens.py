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
Sources of the OAuth access token sent with every request.
"""

import base64
import json
import logging
from subprocess import Popen, PIPE
import threading
import time

import requests
from requests.auth import AuthBase

from .errors import TokenError, UaaError

CF = 'cf'
DEFAULT_CLIENT_ID = 'cf'

# Seconds before the real expiration time when a token is already treated as expired.
EXPIRATION_MARGIN = 30

_log = logging.getLogger(__name__) # pylint: disable=invalid-name


class TokenAuth(AuthBase):
    """
    Authentication for `requests` putting the provider's token in the "Authorization" header.
    """

    def __init__(self, token_provider):
        self.token_provider = token_provider

    def __call__(self, request):
        request.headers['Authorization'] = self.token_provider.get_token()
        return request


class StaticTokenProvider:
    """
    Always gives the same token. It won't be refreshed.
    """

    def __init__(self, token):
        self._token = _bearer(token)

    def get_token(self):
        return self._token


class CfCliTokenProvider:
    """Gets the token of the user logged in with CF CLI ("cf oauth-token").
    CF CLI refreshes the token if it needs to."""

    def get_token(self):
        """
        Returns:
            str: "Authorization" header value.

        Raises:
            TokenError: When "cf oauth-token" fails.
        """
        command_out = _get_command_output([CF, 'oauth-token'])
        lines = command_out.strip().splitlines()
        if not lines:
            raise TokenError('"cf oauth-token" returned no token.')
        return _bearer(lines[-1].strip())


class PasswordGrantTokenProvider:
    """Logs into UAA with a user's credentials (password grant) and refreshes the token when
    it expires.

    Attributes:
        token_endpoint (str): UAA address, as given by "/v2/info".
        username (str): Cloud Foundry user.
        client_id (str): OAuth client the token is requested for.
    """

    def __init__(self, token_endpoint, username, password, # pylint: disable=too-many-arguments
                 client_id=DEFAULT_CLIENT_ID, client_secret='', session=None):
        self.token_endpoint = token_endpoint
        self.username = username
        self.client_id = client_id
        self._password = password
        self._client_secret = client_secret
        self._session = session or requests.Session()
        self._auth = None
        self._lock = threading.Lock()

    def get_token(self):
        """
        Returns:
            str: "Authorization" header value.

        Raises:
            TokenError: When UAA can't be reached or sends an unusable response.
            UaaError: When UAA rejects the credentials.
        """
        with self._lock:
            if self._auth is None:
                self._auth = self._request_token(self._password_grant())
            elif is_expired(self._auth['access_token'], time.time() + EXPIRATION_MARGIN):
                if 'refresh_token' in self._auth:
                    self._auth = self._request_token(self._refresh_grant())
                else:
                    self._auth = self._request_token(self._password_grant())
            return _bearer(self._auth['access_token'])

    def _password_grant(self):
        return {'grant_type': 'password', 'username': self.username, 'password': self._password}

    def _refresh_grant(self):
        return {'grant_type': 'refresh_token', 'refresh_token': self._auth['refresh_token']}

    def _request_token(self, data):
        url = '/'.join([self.token_endpoint.rstrip('/'), 'oauth', 'token'])
        data = dict(data, client_id=self.client_id, client_secret=self._client_secret)
        _log.info('Requesting %s token for user %s from %s', data['grant_type'], self.username, url)
        try:
            response = self._session.post(url, data=data, headers={'Accept': 'application/json'})
        except requests.RequestException as ex:
            raise TokenError('Failed to reach UAA at {}: {}'.format(url, ex)) from ex

        try:
            payload = response.json()
        except ValueError as ex:
            raise TokenError('UAA sent a malformed token response: {}'.format(ex)) from ex
        if response.status_code != 200:
            raise UaaError.from_payload(response.status_code, payload, response.reason)
        if 'access_token' not in payload:
            raise TokenError('UAA response has no access token.')
        return payload


def jwt_decode(jwt):
    """Decodes the claims of a JWT without verifying its signature.

    Args:
        jwt (str): The token.

    Returns:
        dict: Token's claims.

    Raises:
        TokenError: The token is malformed.
    """
    parts = jwt.split('.')
    if len(parts) != 3:
        raise TokenError('JWT is invalid: {}'.format(jwt))
    try:
        claims = base64.urlsafe_b64decode(parts[1] + '==').decode('utf-8')
        return json.loads(claims)
    except ValueError as ex:
        raise TokenError('JWT is invalid: {}'.format(ex)) from ex


def is_expired(jwt, now):
    """
    Args:
        jwt (str): The token.
        now (float): Current time as a Unix timestamp.

    Returns:
        bool: Whether the token has expired at the given time.
    """
    claims = jwt_decode(jwt)
    if 'exp' not in claims:
        raise TokenError('JWT expiration not found: {}'.format(claims))
    return int(claims['exp']) <= now


def _bearer(token):
    if token.lower().startswith('bearer '):
        return token
    return 'bearer ' + token


def _get_command_output(command):
    """Gets output of a generic command.

    Args:
        command (list[str]): List of command parts (like in constructor of Popen)

    Raises:
        TokenError: When the command fails (returns non-zero code).
    """
    try:
        proc = Popen(command, stdout=PIPE)
    except OSError as ex:
        raise TokenError('Failed to run {}: {}'.format(' '.join(command), ex)) from ex
    return_code = proc.wait()
    output = proc.stdout.read().decode('utf-8')

    if return_code == 0:
        return output
    else:
        raise TokenError('Failed command: {}\nOutput: {}'.format(' '.join(command), output))
