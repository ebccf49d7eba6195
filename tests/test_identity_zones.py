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

from cfclient.errors import UaaError, ValidationError
from cfclient.uaa.identity_zones import (CreateIdentityZoneRequest, DeleteIdentityZoneRequest,
                                         GetIdentityZoneRequest, IdentityZoneConfiguration,
                                         IdentityZones, Links, ListIdentityZonesRequest,
                                         UpdateIdentityZoneRequest)
from .utils import UAA_ROOT, load_cfclient_resource, make_response

TIMEOUT = 5


@pytest.fixture
def identity_zones(mock_session, executor):
    return IdentityZones(mock_session, UAA_ROOT, executor)


@pytest.fixture
def zone_payload():
    return load_cfclient_resource('identity_zone.json')


def test_create(identity_zones, mock_session, zone_payload):
    mock_session.request.return_value = make_response(201, zone_payload, 'Created')

    zone = identity_zones.create(CreateIdentityZoneRequest(
        identity_zone_id='twiglet-get',
        name='The Twiglet Zone',
        subdomain='twiglet-get',
        configuration=IdentityZoneConfiguration(
            idp_discovery_enabled=False,
            links=Links(home_redirect='http://my.hosted.homepage.com/')))).block(TIMEOUT)

    mock_session.request.assert_called_once_with(
        'POST', UAA_ROOT + '/identity-zones',
        json={'config': {'idpDiscoveryEnabled': False,
                         'links': {'homeRedirect': 'http://my.hosted.homepage.com/'}},
              'id': 'twiglet-get',
              'name': 'The Twiglet Zone',
              'subdomain': 'twiglet-get'},
        stream=True)
    assert zone.id == 'twiglet-get'
    assert zone.created_at == 946710000000


def test_create_invalid(identity_zones, mock_session):
    with pytest.raises(ValidationError) as exc_info:
        identity_zones.create(CreateIdentityZoneRequest()).block(TIMEOUT)

    assert exc_info.value.messages == ['name must be specified', 'subdomain must be specified']
    assert not mock_session.request.called


def test_get(identity_zones, mock_session, zone_payload):
    mock_session.request.return_value = make_response(200, zone_payload)

    zone = identity_zones.get(GetIdentityZoneRequest(identity_zone_id='twiglet-get')).block(TIMEOUT)

    mock_session.request.assert_called_once_with(
        'GET', UAA_ROOT + '/identity-zones/twiglet-get', json=None, stream=True)
    assert zone.name == 'The Twiglet Zone'
    assert zone.description == 'Like the Twilight Zone but tastier.'
    logout = zone.configuration.links.logout
    assert logout.redirect_url == '/login'
    assert logout.disable_redirect_parameter is True
    assert logout.whitelist == ('https://example.com/logout',)
    assert zone.configuration.links.self_service.self_service_links_enabled is True
    assert zone.configuration.account_chooser_enabled is False


def test_get_not_found(identity_zones, mock_session):
    mock_session.request.return_value = make_response(
        404, {'error': 'not_found', 'error_description': 'Zone not found'}, 'Not Found')

    with pytest.raises(UaaError) as exc_info:
        identity_zones.get(GetIdentityZoneRequest(identity_zone_id='missing')).block(TIMEOUT)

    assert str(exc_info.value) == 'not_found: Zone not found'


def test_list(identity_zones, mock_session, zone_payload):
    second = dict(zone_payload, id='uaa', name='uaa', subdomain='')
    mock_session.request.return_value = make_response(200, [zone_payload, second])

    response = identity_zones.list(ListIdentityZonesRequest()).block(TIMEOUT)

    mock_session.request.assert_called_once_with(
        'GET', UAA_ROOT + '/identity-zones', json=None, stream=True)
    assert [zone.id for zone in response.identity_zones] == ['twiglet-get', 'uaa']


def test_update(identity_zones, mock_session, zone_payload):
    mock_session.request.return_value = make_response(200, zone_payload)

    zone = identity_zones.update(UpdateIdentityZoneRequest(
        identity_zone_id='twiglet-get', name='The Twiglet Zone', subdomain='twiglet-get',
        version=0)).block(TIMEOUT)

    mock_session.request.assert_called_once_with(
        'PUT', UAA_ROOT + '/identity-zones/twiglet-get',
        json={'id': 'twiglet-get', 'name': 'The Twiglet Zone', 'subdomain': 'twiglet-get',
              'version': 0},
        stream=True)
    assert zone.version == 0


def test_update_invalid(identity_zones, mock_session):
    with pytest.raises(ValidationError) as exc_info:
        identity_zones.update(UpdateIdentityZoneRequest()).block(TIMEOUT)

    assert exc_info.value.messages == ['identity zone id must be specified',
                                       'name must be specified',
                                       'subdomain must be specified']


def test_delete(identity_zones, mock_session, zone_payload):
    mock_session.request.return_value = make_response(200, zone_payload)

    zone = identity_zones.delete(
        DeleteIdentityZoneRequest(identity_zone_id='twiglet-get')).block(TIMEOUT)

    mock_session.request.assert_called_once_with(
        'DELETE', UAA_ROOT + '/identity-zones/twiglet-get', json=None, stream=True)
    assert zone.id == 'twiglet-get'
