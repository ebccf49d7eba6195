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
Turning the query fields of request objects into URL query parameters.
"""

import datetime
import enum

from .model import Field

DATE_FORMAT = '%Y-%m-%dT%H:%M:%SZ'


class FilterOperation(enum.Enum):
    """
    Operations of the Cloud Controller v2 "q" filter syntax.
    """
    IS = ':'
    GREATER_THAN = '>'
    GREATER_THAN_OR_EQUAL_TO = '>='
    LESS_THAN = '<'
    LESS_THAN_OR_EQUAL_TO = '<='
    IN = ' IN '


class FilterField(Field):
    """Field sent as a v2 filter, e.g. "q=name IN app-1,app-2".
    Every filter field makes its own "q" parameter.

    Attributes:
        filter_name (str): Name of the filtered property.
        operation (`FilterOperation`): How the property is compared to the value.
    """

    def __init__(self, filter_name, operation=FilterOperation.IN):
        super().__init__('q', query=True)
        self.filter_name = filter_name
        self.operation = operation

    def __repr__(self):
        return '{}({!r}, {})'.format(self.__class__.__name__, self.filter_name,
                                     self.operation.name)


def augment(builder, request):
    """Appends a query parameter for every query field of the request that holds a non-empty
    value. Fields are handled in their declaration order.

    Args:
        builder (`cfclient.uri.UriBuilder`): Builder of the request's URI.
        request (`cfclient.model.Model`): Request object. Can be None.
    """
    if request is None:
        return
    for attr, field in request.fields():
        if not field.query:
            continue
        value = getattr(request, attr)
        if _is_absent(value):
            continue
        if isinstance(field, FilterField):
            builder.query_param(field.name, _filter_value(field, value))
        elif isinstance(value, (list, tuple)):
            values = [to_query_value(element) for element in value]
            if field.collection == 'multi':
                builder.query_param(field.name, *values)
            else:
                builder.query_param(field.name, ','.join(values))
        else:
            builder.query_param(field.name, to_query_value(value))


def to_query_value(value):
    """
    Args:
        value (object): Single (non-list) value of a query field.

    Returns:
        str: The value's representation in a query string.
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    elif isinstance(value, enum.Enum):
        return str(value.value)
    elif isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc)
        return value.strftime(DATE_FORMAT)
    else:
        return str(value)


def _filter_value(field, value):
    operation = field.operation
    if isinstance(value, (list, tuple)):
        if len(value) == 1 and operation is FilterOperation.IN:
            operation = FilterOperation.IS
        value = ','.join(to_query_value(element) for element in value)
    else:
        value = to_query_value(value)
    return '{}{}{}'.format(field.filter_name, operation.value, value)


def _is_absent(value):
    return value is None or (isinstance(value, (str, list, tuple)) and not value)
