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
Going through all the pages of v2 list operations.

    resources = collect_resources(
        lambda page: client.applications().list(ListApplicationsRequest(page=page)))
"""

from concurrent.futures import TimeoutError as FutureTimeoutError
import logging

_log = logging.getLogger(__name__) # pylint: disable=invalid-name


def iter_resources(page_supplier, timeout=None):
    """Requests the first page, then every remaining one, yielding the resources of each.
    Pages are requested one at a time, when the previous one has been consumed.

    Args:
        page_supplier (callable): Function taking a page number (starting with 1) and returning
            a `cfclient.deferred.Deferred` of a `cfclient.v2.PaginatedResponse`.
        timeout (float): Seconds to wait for each page. Waits indefinitely if None.

    Yields:
        `cfclient.v2.Resource`: Resources from all the pages.
    """
    first_page = _block(page_supplier(1), timeout)
    total_pages = first_page.total_pages or 1
    _log.debug('Listing %s resources on %s pages', first_page.total_results, total_pages)
    for resource in first_page.resources or ():
        yield resource

    for page_number in range(2, total_pages + 1):
        page = _block(page_supplier(page_number), timeout)
        for resource in page.resources or ():
            yield resource


def collect_resources(page_supplier, timeout=None):
    """
    Args:
        page_supplier (callable): See `iter_resources`.
        timeout (float): Seconds to wait for each page.

    Returns:
        list[`cfclient.v2.Resource`]: Resources from all the pages.
    """
    return list(iter_resources(page_supplier, timeout))


def _block(deferred, timeout):
    try:
        return deferred.block(timeout)
    except FutureTimeoutError:
        deferred.cancel()
        raise
