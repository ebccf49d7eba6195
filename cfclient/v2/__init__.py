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
Cloud Controller v2 API. Objects shared by all of its resources.
"""

import enum

from ..errors import ClientV2Error
from ..model import Field, Model
from ..operations import AbstractOperations
from ..validation import Validatable


class OrderDirection(enum.Enum):
    ASCENDING = 'asc'
    DESCENDING = 'desc'


class PaginatedRequest(Model, Validatable):
    """
    Base for requests of the list operations.
    """
    order_direction = Field('order-direction', query=True)
    page = Field(query=True)
    results_per_page = Field('results-per-page', query=True)


class Metadata(Model):
    """
    Metadata of every v2 resource.
    """
    id = Field('guid')
    url = Field()
    created_at = Field()
    updated_at = Field()


class Resource(Model):
    """A v2 resource: metadata and an entity.
    Subclasses declare the entity's type by overriding the `entity` field."""
    metadata = Field(model=Metadata)
    entity = Field()


class PaginatedResponse(Model):
    """A page of v2 resources.
    Subclasses declare the resource type by overriding the `resources` field."""
    total_results = Field()
    total_pages = Field()
    prev_url = Field()
    next_url = Field()
    resources = Field()


class ClientV2Operations(AbstractOperations):
    """
    Base for the operations of the v2 API.
    """
    error_type = ClientV2Error
