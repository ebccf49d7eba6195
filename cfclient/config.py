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
Connection configuration, read from a YAML file:

    api_url: https://api.example.com
    uaa_url: https://uaa.example.com
    username: admin
    password: secret
    ssl_validation: true
    workers: 4

Values not in the file are taken from CF_* environment variables (e.g. CF_API_URL, CF_PASSWORD).
"""

import logging
import os

import requests
import yaml

from .errors import ConfigurationError
from .tokens import (CfCliTokenProvider, DEFAULT_CLIENT_ID, PasswordGrantTokenProvider,
                     StaticTokenProvider)

DEFAULT_CONFIG_FILE = 'cfclient.yml'
DEFAULT_WORKERS = 4

_ENV_PREFIX = 'CF_'

_log = logging.getLogger(__name__) # pylint: disable=invalid-name


class ConnectionContext:
    """Everything needed to connect to a Cloud Foundry instance.

    Attributes:
        api_url (str): Cloud Controller API URL, e.g. "https://api.run.pivotal.io".
        uaa_url (str): UAA URL. If not set, it's taken from "/v2/info".
        token (str): Access token. Takes precedence over the user's credentials.
        username (str): Cloud Foundry user.
        password (str): Password for the Cloud Foundry user.
        client_id (str): OAuth client used when logging in with the user's credentials.
        client_secret (str): Secret of the OAuth client.
        ssl_validation (bool): Should the SSL (actually TLS) connections be validated.
        workers (int): Number of threads carrying out the requests.
    """

    def __init__(self, api_url, uaa_url=None, token=None, # pylint: disable=too-many-arguments
                 username=None, password=None, client_id=DEFAULT_CLIENT_ID, client_secret='',
                 ssl_validation=True, workers=DEFAULT_WORKERS):
        if not api_url:
            raise ConfigurationError('Cloud Foundry API URL (api_url) not specified.')
        self.api_url = api_url
        self.uaa_url = uaa_url
        self.token = token
        self.username = username
        self.password = password
        self.client_id = client_id
        self.client_secret = client_secret
        self.ssl_validation = ssl_validation
        self.workers = workers

    @staticmethod
    def from_dict(config_dict):
        """
        Args:
            config_dict (dict): Configuration YAML loaded into dictionary.

        Returns:
            `ConnectionContext`: Configuration deserialized from the dictionary.

        Raises:
            ConfigurationError: When the configuration is malformed.
        """
        try:
            return ConnectionContext(**config_dict)
        except TypeError as ex:
            raise ConfigurationError('Connection configuration malformed.\n'
                                     'Error: {}\n'
                                     'Source dict: {}'.format(ex, _masked(config_dict)))

    def token_provider(self, token_endpoint=None):
        """Picks the token source: a fixed token, logging in with the user's credentials or
        the token of CF CLI, in that order.

        Args:
            token_endpoint (str): UAA address used for logging in. Defaults to `uaa_url`.

        Returns:
            object: Token provider (has a `get_token` method).
        """
        if self.token:
            return StaticTokenProvider(self.token)
        if self.username and self.password:
            endpoint = token_endpoint or self.uaa_url
            if not endpoint:
                raise ConfigurationError('UAA URL needed to log in user {}.'.format(self.username))
            session = requests.Session()
            session.verify = self.ssl_validation
            return PasswordGrantTokenProvider(endpoint, self.username, self.password,
                                              self.client_id, self.client_secret, session)
        _log.debug('No token or credentials configured, using the token of CF CLI.')
        return CfCliTokenProvider()


def load_config(config_path=DEFAULT_CONFIG_FILE, environ=None):
    """
    Args:
        config_path (str): Path to the YAML configuration file. If it doesn't exist only
            the environment variables are used.
        environ (dict): Environment variables. Defaults to `os.environ`.

    Returns:
        `ConnectionContext`: The configuration.

    Raises:
        ConfigurationError: When the configuration is malformed.
    """
    config_dict = {}
    if config_path and os.path.exists(config_path):
        _log.debug('Reading connection configuration from %s', os.path.realpath(config_path))
        with open(config_path) as config_file:
            try:
                config_dict = yaml.safe_load(config_file) or {}
            except yaml.YAMLError as ex:
                raise ConfigurationError('Malformed YAML in {}: {}'.format(config_path, ex))
        if not isinstance(config_dict, dict):
            raise ConfigurationError('{} should contain a mapping, not {}'
                                     .format(config_path, type(config_dict).__name__))

    environ = os.environ if environ is None else environ
    for key, value in _from_environment(environ).items():
        config_dict.setdefault(key, value)
    return ConnectionContext.from_dict(config_dict)


def _from_environment(environ):
    values = {}
    for name in ('api_url', 'uaa_url', 'token', 'username', 'password',
                 'client_id', 'client_secret'):
        env_name = _ENV_PREFIX + name.upper()
        if environ.get(env_name):
            values[name] = environ[env_name]
    if environ.get('CF_SSL_VALIDATION'):
        values['ssl_validation'] = environ['CF_SSL_VALIDATION'].lower() != 'false'
    return values


def _masked(config_dict):
    return {key: '***' if key in ('password', 'token', 'client_secret') else value
            for key, value in config_dict.items()}
