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
Identity zones of UAA. UAA names the fields of a zone's configuration in camel case.
"""

from ..model import Field, Model
from ..validation import Validatable, ValidationResult
from . import UaaOperations


class LogoutLink(Model):
    """Logout settings of an identity zone.

    Attributes:
        disable_redirect_parameter (bool): Whether or not to allow the redirect parameter on
            logout.
        redirect_parameter_name (str): Name of the redirect parameter.
        redirect_url (str): Logout redirect URL.
        whitelist (list[str]): Allowed redirects.
    """
    disable_redirect_parameter = Field('disableRedirectParameter')
    redirect_parameter_name = Field('redirectParameterName')
    redirect_url = Field('redirectUrl')
    whitelist = Field()


class SelfServiceLink(Model):
    password_link = Field('passwd')
    self_service_links_enabled = Field('selfServiceLinksEnabled')
    signup_link = Field('signup')


class Links(Model):
    home_redirect = Field('homeRedirect')
    logout = Field(model=LogoutLink)
    self_service = Field('selfService', model=SelfServiceLink)


class IdentityZoneConfiguration(Model):
    account_chooser_enabled = Field('accountChooserEnabled')
    idp_discovery_enabled = Field('idpDiscoveryEnabled')
    issuer = Field()
    links = Field(model=Links)


class IdentityZone(Model):
    """
    An identity zone, as returned by UAA.
    """
    configuration = Field('config', model=IdentityZoneConfiguration)
    created_at = Field('created')
    description = Field()
    id = Field()
    last_modified = Field()
    name = Field()
    subdomain = Field()
    version = Field()


class CreateIdentityZoneRequest(Model, Validatable):
    configuration = Field('config', model=IdentityZoneConfiguration)
    description = Field()
    identity_zone_id = Field('id')
    name = Field()
    subdomain = Field()
    version = Field()

    def validate(self):
        messages = []
        if self.name is None:
            messages.append('name must be specified')
        if self.subdomain is None:
            messages.append('subdomain must be specified')
        return ValidationResult(messages)


class CreateIdentityZoneResponse(IdentityZone):
    pass


class GetIdentityZoneRequest(Model, Validatable):
    identity_zone_id = Field(path=True)

    def validate(self):
        messages = []
        if self.identity_zone_id is None:
            messages.append('identity zone id must be specified')
        return ValidationResult(messages)


class GetIdentityZoneResponse(IdentityZone):
    pass


class ListIdentityZonesRequest(Model, Validatable):
    pass


class ListIdentityZonesResponse(Model):
    """
    UAA lists the zones as a bare JSON array.
    """
    identity_zones = Field(model=IdentityZone, many=True)

    @classmethod
    def from_json(cls, payload):
        return cls.from_dict({'identity_zones': payload})


class UpdateIdentityZoneRequest(Model, Validatable):
    configuration = Field('config', model=IdentityZoneConfiguration)
    description = Field()
    identity_zone_id = Field('id')
    name = Field()
    subdomain = Field()
    version = Field()

    def validate(self):
        messages = []
        if self.identity_zone_id is None:
            messages.append('identity zone id must be specified')
        if self.name is None:
            messages.append('name must be specified')
        if self.subdomain is None:
            messages.append('subdomain must be specified')
        return ValidationResult(messages)


class UpdateIdentityZoneResponse(IdentityZone):
    pass


class DeleteIdentityZoneRequest(Model, Validatable):
    identity_zone_id = Field(path=True)

    def validate(self):
        messages = []
        if self.identity_zone_id is None:
            messages.append('identity zone id must be specified')
        return ValidationResult(messages)


class DeleteIdentityZoneResponse(IdentityZone):
    pass


class IdentityZones(UaaOperations):
    """
    Operations on the "/identity-zones" resource.
    """

    def create(self, request):
        """
        Args:
            request (`CreateIdentityZoneRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `CreateIdentityZoneResponse`
        """
        return self._post(request, CreateIdentityZoneResponse,
                          lambda builder: builder.path_segment('identity-zones'))

    def get(self, request):
        """
        Args:
            request (`GetIdentityZoneRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `GetIdentityZoneResponse`
        """
        return self._get(request, GetIdentityZoneResponse,
                         lambda builder: builder.path_segment(
                             'identity-zones', request.identity_zone_id))

    def list(self, request):
        """
        Args:
            request (`ListIdentityZonesRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `ListIdentityZonesResponse`
        """
        return self._get(request, ListIdentityZonesResponse,
                         lambda builder: builder.path_segment('identity-zones'))

    def update(self, request):
        """
        Args:
            request (`UpdateIdentityZoneRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `UpdateIdentityZoneResponse`
        """
        return self._put(request, UpdateIdentityZoneResponse,
                         lambda builder: builder.path_segment(
                             'identity-zones', request.identity_zone_id))

    def delete(self, request):
        """
        Args:
            request (`DeleteIdentityZoneRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `DeleteIdentityZoneResponse`
        """
        return self._delete(request, DeleteIdentityZoneResponse,
                            lambda builder: builder.path_segment(
                                'identity-zones', request.identity_zone_id))
