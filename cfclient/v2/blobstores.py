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
Blobstores of the v2 API.
"""

from ..model import Model
from ..validation import Validatable
from . import ClientV2Operations
from .jobs import JobResource


class DeleteBlobstoreBuildpackCachesRequest(Model, Validatable):
    pass


class DeleteBlobstoreBuildpackCachesResponse(JobResource):
    pass


class Blobstores(ClientV2Operations):
    """
    Operations on the "/v2/blobstores" resource.
    """

    def delete_buildpack_caches(self, request):
        """Starts a job deleting the buildpack caches of all applications.
        Use `cfclient.v2.jobs.wait_for_completion` to wait for it.

        Args:
            request (`DeleteBlobstoreBuildpackCachesRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `DeleteBlobstoreBuildpackCachesResponse`
        """
        return self._delete(request, DeleteBlobstoreBuildpackCachesResponse,
                            lambda builder: builder.path_segment(
                                'v2', 'blobstores', 'buildpack_cache'))
