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
Asynchronous jobs of the v2 API and waiting for them to end.
"""

from concurrent.futures import TimeoutError as FutureTimeoutError
import logging
import time

from ..errors import JobFailedError, JobTimeoutError
from ..model import Field, Model
from ..validation import Validatable, ValidationResult
from . import ClientV2Operations, Resource

_log = logging.getLogger(__name__) # pylint: disable=invalid-name

FINISHED_STATUS = 'finished'
FAILED_STATUS = 'failed'

DEFAULT_POLL_INTERVAL = 1


class ErrorDetails(Model):
    code = Field()
    description = Field()
    error_code = Field()


class JobEntity(Model):
    error = Field()
    error_details = Field(model=ErrorDetails)
    id = Field('guid')
    status = Field()


class JobResource(Resource):
    entity = Field(model=JobEntity)


class GetJobRequest(Model, Validatable):
    job_id = Field(path=True)

    def validate(self):
        messages = []
        if self.job_id is None:
            messages.append('job id must be specified')
        return ValidationResult(messages)


class GetJobResponse(JobResource):
    pass


class Jobs(ClientV2Operations):
    """
    Operations on the "/v2/jobs" resource.
    """

    def get(self, request):
        """
        Args:
            request (`GetJobRequest`):

        Returns:
            `cfclient.deferred.Deferred`: `GetJobResponse`
        """
        return self._get(request, GetJobResponse,
                         lambda builder: builder.path_segment('v2', 'jobs', request.job_id))


def wait_for_completion(client, timeout, job, poll_interval=DEFAULT_POLL_INTERVAL):
    """Polls a job until it finishes. Blocks the calling thread.

    Args:
        client (`cfclient.client.CloudFoundryClient`): Client used to poll the job.
        timeout (float): Seconds after which waiting is abandoned.
        job (`JobResource`): The job, as returned by the operation that started it.
        poll_interval (float): Seconds between polls.

    Returns:
        `JobResource`: The job in "finished" status.

    Raises:
        JobFailedError: The job failed. Carries the job's error details.
        JobTimeoutError: The job didn't end in time.
    """
    deadline = time.time() + timeout
    job_id = job.entity.id
    while True:
        status = job.entity.status
        if status == FINISHED_STATUS:
            _log.debug('Job %s finished', job_id)
            return job
        if status == FAILED_STATUS:
            raise _job_failure(job)

        remaining = deadline - time.time()
        if remaining <= 0:
            raise JobTimeoutError('Job {} did not finish in {} seconds. Last status: {}'
                                  .format(job_id, timeout, status))
        _log.info('Job %s is %s, waiting...', job_id, status)
        time.sleep(min(poll_interval, remaining))
        deferred = client.jobs().get(GetJobRequest(job_id=job_id))
        try:
            job = deferred.block(max(deadline - time.time(), 0))
        except FutureTimeoutError:
            deferred.cancel()
            raise JobTimeoutError('Job {} did not finish in {} seconds. Last status: {}'
                                  .format(job_id, timeout, status))


def _job_failure(job):
    details = job.entity.error_details
    if details is None:
        return JobFailedError(None, 'JobFailed', job.entity.error)
    return JobFailedError(None, details.error_code, details.description, code=details.code)
