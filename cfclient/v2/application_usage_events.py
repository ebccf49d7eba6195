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
Application usage events of the v2 API.
"""

from ..model import Field, Model
from ..query import augment
from ..validation import Validatable, ValidationResult
from . import ClientV2Operations, PaginatedRequest, PaginatedResponse, Resource


class ApplicationUsageEventEntity(Model):
    """
    State change of an application, as recorded for billing.
    """
    application_id = Field('app_guid')
    application_name = Field('app_name')
    buildpack_id = Field('buildpack_guid')
    buildpack_name = Field('buildpack_name')
    instance_count = Field()
    memory_in_mb_per_instance = Field()
    organization_id = Field('org_guid')
    package_state = Field()
    parent_application_id = Field('parent_app_guid')
    parent_application_name = Field('parent_app_name')
    previous_instance_count = Field()
    previous_memory_in_mb_per_instance = Field()
    previous_package_state = Field()
    previous_state = Field()
    process_type = Field()
    space_id = Field('space_guid')
    space_name = Field()
    state = Field()
    task_id = Field('task_guid')
    task_name = Field()


class ApplicationUsageEventResource(Resource):
    entity = Field(model=ApplicationUsageEventEntity)


class GetApplicationUsageEventRequest(Model, Validatable):
    application_usage_event_id = Field(path=True)

    def validate(self):
        messages = []
        if self.application_usage_event_id is None:
            messages.append('application usage event id must be specified')
        return ValidationResult(messages)


class GetApplicationUsageEventResponse(ApplicationUsageEventResource):
    pass


class ListApplicationUsageEventsRequest(PaginatedRequest):
    """Lists events in the order they were created.

    Attributes:
        after_application_usage_event_id (str): Only events created after the one with this id
            are listed.
    """
    after_application_usage_event_id = Field('after_guid', query=True)


class ListApplicationUsageEventsResponse(PaginatedResponse):
    resources = Field(model=ApplicationUsageEventResource, many=True)


class PurgeAndReseedApplicationUsageEventsRequest(Model, Validatable):
    pass


class ApplicationUsageEvents(ClientV2Operations):
    """
    Operations on the "/v2/app_usage_events" resource.
    """

    def get(self, request):
        """
        Args:
            request (`GetApplicationUsageEventRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `GetApplicationUsageEventResponse`
        """
        return self._get(request, GetApplicationUsageEventResponse,
                         lambda builder: builder.path_segment(
                             'v2', 'app_usage_events', request.application_usage_event_id))

    def list(self, request):
        """
        Args:
            request (`ListApplicationUsageEventsRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `ListApplicationUsageEventsResponse`
        """
        def _uri(builder):
            builder.path_segment('v2', 'app_usage_events')
            augment(builder, request)
        return self._get(request, ListApplicationUsageEventsResponse, _uri)

    def purge_and_reseed(self, request):
        """Destroys all existing events and creates new "STARTED" events for the applications
        that are running.

        Args:
            request (`PurgeAndReseedApplicationUsageEventsRequest`):

        Returns:
            `cfclient.deferred.Deferred`: Empty result.
        """
        return self._post(request, None,
                          lambda builder: builder.path_segment(
                              'v2', 'app_usage_events',
                              'destructively_purge_all_and_reseed_started_apps'))
