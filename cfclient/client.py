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
Entry points of the library: clients giving access to the operations of every resource.

    with connect(load_config('cfclient.yml')) as client:
        events = client.application_usage_events().list(
            ListApplicationUsageEventsRequest()).block(timeout=30)
"""

from concurrent.futures import ThreadPoolExecutor
import logging

import requests

from . import __version__
from .config import DEFAULT_WORKERS
from .tokens import TokenAuth
from .uaa.identity_zones import IdentityZones
from .v2.application_usage_events import ApplicationUsageEvents
from .v2.applications import Applications
from .v2.blobstores import Blobstores
from .v2.info import GetInfoRequest, Info
from .v2.jobs import Jobs

USER_AGENT = 'cfclient/{}'.format(__version__)

_log = logging.getLogger(__name__) # pylint: disable=invalid-name


def create_session(token_provider=None, ssl_validation=True):
    """
    Args:
        token_provider (object): Source of the access token. The session is unauthenticated
            if None.
        ssl_validation (bool): Should the SSL (actually TLS) connections be validated.

    Returns:
        `requests.Session`: Session configured for talking to the platform APIs.
    """
    session = requests.Session()
    if token_provider is not None:
        session.auth = TokenAuth(token_provider)
    session.verify = ssl_validation
    session.headers.update({'Accept': 'application/json', 'User-Agent': USER_AGENT})
    return session


class _Client:
    """Holds the session and the executor shared by all the operations of one server.
    Whatever the client created itself, it also closes."""

    def __init__(self, root, token_provider=None, session=None, # pylint: disable=too-many-arguments
                 executor=None, ssl_validation=True, workers=DEFAULT_WORKERS):
        self.root = root
        self._owns_session = session is None
        self._session = session or create_session(token_provider, ssl_validation)
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=workers,
                                                        thread_name_prefix='cfclient')
        self._operations = {}

    def _get_operations(self, operations_class):
        if operations_class not in self._operations:
            self._operations[operations_class] = operations_class(self._session, self.root,
                                                                  self._executor)
        return self._operations[operations_class]

    def close(self, wait=True):
        """
        Args:
            wait (bool): Should the running requests be waited for. If not, the queued ones
                are cancelled.
        """
        if self._owns_executor:
            self._executor.shutdown(wait=wait, cancel_futures=not wait)
        if self._owns_session:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close(wait=exc_type is None)

    def __repr__(self):
        return '{}(root={})'.format(self.__class__.__name__, self.root)


class CloudFoundryClient(_Client):
    """
    Client of the v2 Cloud Controller API.
    """

    def application_usage_events(self):
        """
        Returns:
            `cfclient.v2.application_usage_events.ApplicationUsageEvents`
        """
        return self._get_operations(ApplicationUsageEvents)

    def applications(self):
        """
        Returns:
            `cfclient.v2.applications.Applications`
        """
        return self._get_operations(Applications)

    def blobstores(self):
        """
        Returns:
            `cfclient.v2.blobstores.Blobstores`
        """
        return self._get_operations(Blobstores)

    def info(self):
        """
        Returns:
            `cfclient.v2.info.Info`
        """
        return self._get_operations(Info)

    def jobs(self):
        """
        Returns:
            `cfclient.v2.jobs.Jobs`
        """
        return self._get_operations(Jobs)

    def uaa(self, uaa_root=None, timeout=None):
        """Creates a UAA client sharing this client's session and executor.

        Args:
            uaa_root (str): Root URI of UAA. Taken from "/v2/info" if not given.
            timeout (float): Seconds to wait for "/v2/info".

        Returns:
            `UaaClient`
        """
        if uaa_root is None:
            uaa_root = self.info().get(GetInfoRequest()).block(timeout).token_endpoint
        return UaaClient(uaa_root, session=self._session, executor=self._executor)


class UaaClient(_Client):
    """
    Client of the UAA API.
    """

    def identity_zones(self):
        """
        Returns:
            `cfclient.uaa.identity_zones.IdentityZones`
        """
        return self._get_operations(IdentityZones)


def get_token_endpoint(context, timeout=None):
    """Asks the Cloud Controller where UAA is. "/v2/info" doesn't need authentication.

    Args:
        context (`cfclient.config.ConnectionContext`): Connection configuration.
        timeout (float): Seconds to wait for the response.

    Returns:
        str: UAA root URI.
    """
    with CloudFoundryClient(context.api_url, ssl_validation=context.ssl_validation,
                            workers=1) as client:
        info = client.info().get(GetInfoRequest()).block(timeout)
    _log.debug('UAA of %s is at %s', context.api_url, info.token_endpoint)
    return info.token_endpoint


def connect(context, timeout=None):
    """
    Args:
        context (`cfclient.config.ConnectionContext`): Connection configuration.
        timeout (float): Seconds to wait for "/v2/info", if it needs to be asked about UAA.

    Returns:
        `CloudFoundryClient`: Client authenticated as configured in the context.
    """
    token_endpoint = context.uaa_url
    if token_endpoint is None and not context.token and context.username and context.password:
        token_endpoint = get_token_endpoint(context, timeout)
    return CloudFoundryClient(context.api_url,
                              token_provider=context.token_provider(token_endpoint),
                              ssl_validation=context.ssl_validation,
                              workers=context.workers)
