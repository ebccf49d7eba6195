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
Self-checks of request objects, run before every request.
"""

import logging

from .errors import ValidationError

_log = logging.getLogger(__name__) # pylint: disable=invalid-name


class ValidationResult:
    """Outcome of a request's self-check.

    Attributes:
        messages (tuple[str]): Violations in the order they were found. Empty means valid.
    """

    def __init__(self, messages=None):
        self.messages = tuple(messages or ())

    @property
    def is_valid(self):
        return not self.messages

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.messages == other.messages
        else:
            return False

    def __repr__(self):
        return '{}({})'.format(self.__class__.__name__, list(self.messages))


class Validatable:
    """
    Mixin for request objects that can check themselves before being sent.
    """

    def validate(self):
        """
        Returns:
            `ValidationResult`: Violations of this request. Requests with no required fields
                are always valid.
        """
        return ValidationResult()


def validate(request):
    """
    Args:
        request (object): Request object. Objects that don't implement `validate` are treated
            as valid.

    Returns:
        `ValidationResult`: Result of the request's self-check.
    """
    if request is None or not hasattr(request, 'validate'):
        return ValidationResult()
    return request.validate()


def check(request):
    """Validation gate run before any network I/O.

    Args:
        request (object): Request object.

    Raises:
        ValidationError: With every message collected, when the request is invalid.
    """
    result = validate(request)
    if not result.is_valid:
        _log.debug('%s rejected: %s', type(request).__name__, result.messages)
        raise ValidationError(result.messages)
