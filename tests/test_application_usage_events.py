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

import pytest

from cfclient.errors import ValidationError
from cfclient.v2 import OrderDirection
from cfclient.v2.application_usage_events import (ApplicationUsageEvents,
                                                  GetApplicationUsageEventRequest,
                                                  ListApplicationUsageEventsRequest,
                                                  PurgeAndReseedApplicationUsageEventsRequest)
from .utils import API_ROOT, load_cfclient_resource, make_response

TIMEOUT = 5


@pytest.fixture
def usage_events(mock_session, executor):
    return ApplicationUsageEvents(mock_session, API_ROOT, executor)


def test_get(usage_events, mock_session):
    mock_session.request.return_value = make_response(
        200, load_cfclient_resource('get_app_usage_event.json'))

    event = usage_events.get(GetApplicationUsageEventRequest(
        application_usage_event_id='caac0ed4-febf-48b9-a3c5-d96b0e0cdbb9')).block(TIMEOUT)

    mock_session.request.assert_called_once_with(
        'GET', API_ROOT + '/v2/app_usage_events/caac0ed4-febf-48b9-a3c5-d96b0e0cdbb9',
        json=None, stream=True)
    assert event.metadata.id == 'caac0ed4-febf-48b9-a3c5-d96b0e0cdbb9'
    assert event.entity.application_name == 'name-1964'
    assert event.entity.buildpack_name == 'name-1966'
    assert event.entity.organization_id == 'guid-8ca7d3d0-6ec2-4a9a-84f7-1f3fa1b4a1e7'
    assert event.entity.process_type == 'web'


def test_get_without_id(usage_events, mock_session):
    with pytest.raises(ValidationError) as exc_info:
        usage_events.get(GetApplicationUsageEventRequest()).block(TIMEOUT)

    assert exc_info.value.messages == ['application usage event id must be specified']
    assert not mock_session.request.called


def test_list(usage_events, mock_session):
    mock_session.request.return_value = make_response(
        200, load_cfclient_resource('list_app_usage_events_page1.json'))

    response = usage_events.list(ListApplicationUsageEventsRequest(
        after_application_usage_event_id='event-0',
        order_direction=OrderDirection.ASCENDING,
        results_per_page=2)).block(TIMEOUT)

    mock_session.request.assert_called_once_with(
        'GET',
        API_ROOT + '/v2/app_usage_events?order-direction=asc&results-per-page=2&after_guid=event-0',
        json=None, stream=True)
    assert (response.total_results, response.total_pages) == (3, 2)
    assert response.prev_url is None
    assert [event.metadata.id for event in response.resources] == ['event-1', 'event-2']
    assert response.resources[1].entity.state == 'STOPPED'


def test_list_without_parameters(usage_events, mock_session):
    mock_session.request.return_value = make_response(
        200, load_cfclient_resource('list_app_usage_events_page2.json'))

    response = usage_events.list(ListApplicationUsageEventsRequest()).block(TIMEOUT)

    mock_session.request.assert_called_once_with(
        'GET', API_ROOT + '/v2/app_usage_events', json=None, stream=True)
    assert response.resources[0].entity.instance_count == 2


def test_purge_and_reseed(usage_events, mock_session):
    mock_session.request.return_value = make_response(204, reason='No Content')

    result = usage_events.purge_and_reseed(
        PurgeAndReseedApplicationUsageEventsRequest()).block(TIMEOUT)

    assert result is None
    mock_session.request.assert_called_once_with(
        'POST',
        API_ROOT + '/v2/app_usage_events/destructively_purge_all_and_reseed_started_apps',
        json={}, stream=True)
