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

from concurrent.futures import Future
import logging

from click.testing import CliRunner
from mock import MagicMock
import pytest

from cfclient.config import ConnectionContext
from cfclient.deferred import Deferred
from cfclient.errors import ClientV2Error
from cfclient.main import cli, DEFAULT_TIMEOUT
from cfclient.uaa.identity_zones import ListIdentityZonesRequest, ListIdentityZonesResponse
from cfclient.v2.application_usage_events import (ListApplicationUsageEventsRequest,
                                                  ListApplicationUsageEventsResponse)
from cfclient.v2.applications import ListApplicationsRequest, ListApplicationsResponse
from cfclient.v2.info import GetInfoResponse
from cfclient.v2.jobs import JobResource
from .utils import API_ROOT, UAA_ROOT, load_cfclient_resource


@pytest.fixture
def project_logger(monkeypatch):
    logger = logging.getLogger('cfclient')
    monkeypatch.setattr(logger, 'handlers', list(logger.handlers))
    monkeypatch.setattr(logger, 'level', logger.level)
    return logger


@pytest.fixture
def mock_client(monkeypatch, project_logger):
    client = MagicMock()
    connection = MagicMock()
    connection.__enter__.return_value = client
    monkeypatch.setattr('cfclient.main.connect', MagicMock(return_value=connection))
    monkeypatch.setattr('cfclient.main.load_config', MagicMock(
        return_value=ConnectionContext(API_ROOT, uaa_url=UAA_ROOT)))
    return client


def _invoke(*args, **kwargs):
    return CliRunner().invoke(cli, list(args), **kwargs)


def _events_page(resource_name):
    return ListApplicationUsageEventsResponse.from_json(load_cfclient_resource(resource_name))


def test_info(mock_client):
    mock_client.info.return_value.get.return_value = Deferred.of(
        GetInfoResponse.from_json(load_cfclient_resource('info.json')))

    result = _invoke('info')

    assert result.exit_code == 0
    assert 'api_version: 2.54.0' in result.output
    assert 'token_endpoint: https://uaa.example.com' in result.output


def test_api_error_reported(mock_client):
    mock_client.info.return_value.get.return_value = Deferred.failed(
        ClientV2Error(401, 'CF-InvalidAuthToken', 'Invalid Auth Token'))

    result = _invoke('info')

    assert result.exit_code == 1
    assert 'CF-InvalidAuthToken: Invalid Auth Token' in result.output


def test_usage_events_first_page(mock_client):
    list_events = mock_client.application_usage_events.return_value.list
    list_events.return_value = Deferred.of(_events_page('list_app_usage_events_page1.json'))

    result = _invoke('usage-events', '--after-guid', 'event-0', '--results-per-page', '2')

    assert result.exit_code == 0
    assert 'event-1' in result.output
    assert 'event-3' not in result.output
    list_events.assert_called_once_with(ListApplicationUsageEventsRequest(
        after_application_usage_event_id='event-0', page=1, results_per_page=2))


def test_usage_events_all_pages(mock_client):
    pages = {1: _events_page('list_app_usage_events_page1.json'),
             2: _events_page('list_app_usage_events_page2.json')}
    list_events = mock_client.application_usage_events.return_value.list
    list_events.side_effect = lambda request: Deferred.of(pages[request.page])

    result = _invoke('usage-events', '--all')

    assert result.exit_code == 0
    assert 'event-3' in result.output
    assert list_events.call_count == 2


def test_purge_usage_events(mock_client):
    purge = mock_client.application_usage_events.return_value.purge_and_reseed
    purge.return_value = Deferred.of(None)

    result = _invoke('purge-usage-events', '--yes')

    assert result.exit_code == 0
    assert purge.called


def test_purge_usage_events_not_confirmed(mock_client):
    purge = mock_client.application_usage_events.return_value.purge_and_reseed

    result = _invoke('purge-usage-events', input='n\n')

    assert result.exit_code == 1
    assert not purge.called


def test_apps(mock_client):
    list_apps = mock_client.applications.return_value.list
    list_apps.return_value = Deferred.of(ListApplicationsResponse.from_json({
        'total_results': 1,
        'total_pages': 1,
        'resources': [load_cfclient_resource('create_application.json')],
    }))

    result = _invoke('apps', '-n', 'my_super_app', '-n', 'other_app')

    assert result.exit_code == 0
    assert 'name: my_super_app' in result.output
    list_apps.assert_called_once_with(ListApplicationsRequest(
        names=['my_super_app', 'other_app'], space_ids=[], page=1))


def test_delete_buildpack_caches(mock_client):
    delete = mock_client.blobstores.return_value.delete_buildpack_caches
    delete.return_value = Deferred.of(
        JobResource.from_json(load_cfclient_resource('job_finished.json')))

    result = _invoke('delete-buildpack-caches', '--timeout', '10')

    assert result.exit_code == 0
    assert delete.called
    assert not mock_client.jobs.called


def test_delete_buildpack_caches_failed(mock_client):
    mock_client.blobstores.return_value.delete_buildpack_caches.return_value = Deferred.of(
        JobResource.from_json(load_cfclient_resource('job_failed.json')))

    result = _invoke('delete-buildpack-caches')

    assert result.exit_code == 1
    assert 'UnknownError: An unknown error occurred.' in result.output


def test_identity_zones(mock_client):
    uaa = mock_client.uaa.return_value
    uaa.identity_zones.return_value.list.return_value = Deferred.of(
        ListIdentityZonesResponse.from_json([load_cfclient_resource('identity_zone.json')]))

    result = _invoke('identity-zones')

    assert result.exit_code == 0
    assert 'name: The Twiglet Zone' in result.output
    mock_client.uaa.assert_called_once_with(UAA_ROOT, DEFAULT_TIMEOUT)
    uaa.identity_zones.return_value.list.assert_called_once_with(ListIdentityZonesRequest())


def test_verbose_logging(mock_client, project_logger):
    mock_client.info.return_value.get.return_value = Deferred.of(GetInfoResponse())

    result = _invoke('-v', 'info')

    assert result.exit_code == 0
    assert project_logger.level == logging.DEBUG


def test_timeout_reported_and_call_cancelled(mock_client, monkeypatch):
    monkeypatch.setattr('cfclient.main.DEFAULT_TIMEOUT', 0.01)
    pending = Deferred(Future())
    mock_client.info.return_value.get.return_value = pending

    result = _invoke('info')

    assert result.exit_code == 1
    assert 'Cloud Foundry did not respond in 0.01 seconds.' in result.output
    assert pending.cancelled()


def test_paging_timeout_reported(mock_client, monkeypatch):
    monkeypatch.setattr('cfclient.main.DEFAULT_TIMEOUT', 0.01)
    pending = Deferred(Future())
    mock_client.applications.return_value.list.return_value = pending

    result = _invoke('apps')

    assert result.exit_code == 1
    assert 'did not respond' in result.output
    assert pending.cancelled()
