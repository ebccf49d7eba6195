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
Applications of the v2 API.
"""

from ..model import Field, Model
from ..query import FilterField, FilterOperation, augment
from ..validation import Validatable, ValidationResult
from . import ClientV2Operations, PaginatedRequest, PaginatedResponse, Resource


class ApplicationEntity(Model):
    """
    An application as seen by the Cloud Controller.
    """
    buildpack = Field()
    command = Field()
    console = Field()
    debug = Field()
    detected_buildpack = Field()
    detected_buildpack_id = Field('detected_buildpack_guid')
    detected_start_command = Field()
    diego = Field()
    disk_quota = Field()
    docker_credentials = Field()
    docker_image = Field()
    enable_ssh = Field()
    environment_jsons = Field('environment_json')
    events_url = Field()
    health_check_http_endpoint = Field()
    health_check_timeout = Field()
    health_check_type = Field()
    instances = Field()
    memory = Field()
    name = Field()
    package_state = Field()
    package_updated_at = Field()
    ports = Field()
    production = Field()
    route_mappings_url = Field()
    routes_url = Field()
    service_bindings_url = Field()
    space_id = Field('space_guid')
    space_url = Field()
    stack_id = Field('stack_guid')
    stack_url = Field()
    staging_failed_description = Field()
    staging_failed_reason = Field()
    staging_task_id = Field()
    state = Field()
    version = Field()


class ApplicationResource(Resource):
    entity = Field(model=ApplicationEntity)


class _ApplicationFields(Model):
    """
    Body fields shared by create and update requests.
    """
    buildpack = Field()
    command = Field()
    console = Field()
    debug = Field()
    detected_start_command = Field()
    diego = Field()
    disk_quota = Field()
    docker_credentials_jsons = Field('docker_credentials_json', omit_empty=True)
    docker_image = Field()
    enable_ssh = Field()
    environment_jsons = Field('environment_json', omit_empty=True)
    health_check_timeout = Field()
    health_check_type = Field()
    instances = Field()
    memory = Field()
    name = Field()
    ports = Field(omit_empty=True)
    production = Field()
    space_id = Field('space_guid')
    stack_id = Field('stack_guid')
    staging_failed_description = Field()
    staging_failed_reason = Field()
    state = Field()


class CreateApplicationRequest(_ApplicationFields, Validatable):
    """Request payload for creating an application.
    "console", "debug" and "production" are deprecated by the Cloud Controller."""

    def validate(self):
        messages = []
        if self.name is None:
            messages.append('name must be specified')
        if self.space_id is None:
            messages.append('space id must be specified')
        return ValidationResult(messages)


class CreateApplicationResponse(ApplicationResource):
    pass


class GetApplicationRequest(Model, Validatable):
    application_id = Field(path=True)

    def validate(self):
        messages = []
        if self.application_id is None:
            messages.append('application id must be specified')
        return ValidationResult(messages)


class GetApplicationResponse(ApplicationResource):
    pass


class ListApplicationsRequest(PaginatedRequest):
    """
    Lists applications, optionally filtered.
    """
    diego = FilterField('diego', FilterOperation.IS)
    names = FilterField('name')
    organization_ids = FilterField('organization_guid')
    space_ids = FilterField('space_guid')
    stack_ids = FilterField('stack_guid')


class ListApplicationsResponse(PaginatedResponse):
    resources = Field(model=ApplicationResource, many=True)


class UpdateApplicationRequest(_ApplicationFields, Validatable):
    application_id = Field(path=True)

    def validate(self):
        messages = []
        if self.application_id is None:
            messages.append('application id must be specified')
        return ValidationResult(messages)


class UpdateApplicationResponse(ApplicationResource):
    pass


class DeleteApplicationRequest(Model, Validatable):
    application_id = Field(path=True)

    def validate(self):
        messages = []
        if self.application_id is None:
            messages.append('application id must be specified')
        return ValidationResult(messages)


class Applications(ClientV2Operations):
    """
    Operations on the "/v2/apps" resource.
    """

    def create(self, request):
        """
        Args:
            request (`CreateApplicationRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `CreateApplicationResponse`
        """
        return self._post(request, CreateApplicationResponse,
                          lambda builder: builder.path_segment('v2', 'apps'))

    def get(self, request):
        """
        Args:
            request (`GetApplicationRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `GetApplicationResponse`
        """
        return self._get(request, GetApplicationResponse,
                         lambda builder: builder.path_segment('v2', 'apps', request.application_id))

    def list(self, request):
        """
        Args:
            request (`ListApplicationsRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `ListApplicationsResponse`
        """
        def _uri(builder):
            builder.path_segment('v2', 'apps')
            augment(builder, request)
        return self._get(request, ListApplicationsResponse, _uri)

    def update(self, request):
        """
        Args:
            request (`UpdateApplicationRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `UpdateApplicationResponse`
        """
        return self._put(request, UpdateApplicationResponse,
                         lambda builder: builder.path_segment('v2', 'apps', request.application_id))

    def delete(self, request):
        """
        Args:
            request (`DeleteApplicationRequest`):

        Returns:
            `cfclient.deferred.Deferred`: Empty result.
        """
        return self._delete(request, None,
                            lambda builder: builder.path_segment(
                                'v2', 'apps', request.application_id))
