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
Information about the Cloud Controller, including the addresses of UAA and the other
platform components.
"""

from ..model import Field, Model
from ..validation import Validatable
from . import ClientV2Operations


class GetInfoRequest(Model, Validatable):
    pass


class GetInfoResponse(Model):
    api_version = Field()
    application_ssh_endpoint = Field('app_ssh_endpoint')
    application_ssh_host_key_fingerprint = Field('app_ssh_host_key_fingerprint')
    application_ssh_oauth_client = Field('app_ssh_oauth_client')
    authorization_endpoint = Field()
    build_number = Field('build')
    description = Field()
    doppler_logging_endpoint = Field()
    min_cli_version = Field()
    min_recommended_cli_version = Field()
    name = Field()
    routing_endpoint = Field()
    support = Field()
    token_endpoint = Field()
    version = Field()


class Info(ClientV2Operations):
    """
    Operations on the "/v2/info" resource.
    """

    def get(self, request):
        """
        Args:
            request (`GetInfoRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `GetInfoResponse`
        """
        return self._get(request, GetInfoResponse,
                         lambda builder: builder.path_segment('v2', 'info'))
