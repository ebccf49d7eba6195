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
Immutable value objects mirroring the JSON resources of the platform APIs.

Fields are declared as class attributes:

    class CreateSpaceRequest(Model, Validatable):
        name = Field()
        organization_id = Field('organization_guid')
        developer_ids = Field('developer_guids', omit_empty=True)
"""

import enum
from types import MappingProxyType


class Field:
    """Metadata of a single field of a `Model`.

    Attributes:
        name (str): Name of the field on the wire (JSON property or query parameter).
            Defaults to the attribute's name.
        query (bool): The field is sent as a URL query parameter instead of in the body.
        path (bool): The field is only used to build the URI path, never sent in the body.
        omit_empty (bool): Empty lists, mappings and strings are left out of the body.
        model (type): `Model` subclass the JSON value is decoded into.
        many (bool): The JSON value is a list of `model` objects.
        collection (str): How a list is sent as a query parameter:
            "csv" - a single comma-joined value, "multi" - the parameter repeated for each element.
    """

    def __init__(self, name=None, query=False, path=False, # pylint: disable=too-many-arguments
                 omit_empty=False, model=None, many=False, collection='csv'):
        if collection not in ('csv', 'multi'):
            raise ValueError('Unknown collection format: {}'.format(collection))
        self.name = name
        self.attr = None
        self.query = query
        self.path = path
        self.omit_empty = omit_empty
        self.model = model
        self.many = many
        self.collection = collection

    @property
    def in_body(self):
        return not (self.query or self.path)

    def bind(self, attr):
        self.attr = attr
        if self.name is None:
            self.name = attr

    def decode(self, value):
        """
        Args:
            value (object): JSON value of the field.

        Returns:
            object: Value converted to the field's type.

        Raises:
            TypeError: The value doesn't have the shape the field declares.
        """
        if value is None or self.model is None:
            return value
        if self.many:
            if not isinstance(value, list):
                raise TypeError('Field "{}" expects a list, got {}'
                                .format(self.name, type(value).__name__))
            return [self.model.from_dict(element) for element in value]
        return self.model.from_dict(value)

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self.name)


class Model:
    """
    Base class for request and response objects.
    Instances can't be changed after construction.
    """

    def __init__(self, **values):
        fields = self.fields()
        unknown = set(values) - {attr for attr, _ in fields}
        if unknown:
            raise TypeError('{} got unexpected fields: {}'
                            .format(self.__class__.__name__, ', '.join(sorted(unknown))))
        for attr, _ in fields:
            object.__setattr__(self, attr, _freeze(values.get(attr)))

    @classmethod
    def fields(cls):
        """Declared fields of the class, base classes' fields first.
        The lookup is done once per class.

        Returns:
            tuple[tuple[str, `Field`]]: Pairs of attribute name and field metadata.
        """
        cached = cls.__dict__.get('_field_cache')
        if cached is None:
            collected = {}
            for klass in reversed(cls.__mro__):
                for attr, value in vars(klass).items():
                    if isinstance(value, Field):
                        value.bind(attr)
                        collected[attr] = value
            cached = tuple(collected.items())
            cls._field_cache = cached
        return cached

    @classmethod
    def from_dict(cls, payload):
        """
        Args:
            payload (dict): Decoded JSON object. Keys not matching any field are ignored.

        Returns:
            `Model`: Instance of the class this was called on.

        Raises:
            TypeError: The payload doesn't have the shape of the class.
        """
        if not isinstance(payload, dict):
            raise TypeError('{} expects a JSON object, got {}'
                            .format(cls.__name__, type(payload).__name__))
        values = {}
        for attr, field in cls.fields():
            if field.name in payload:
                values[attr] = field.decode(payload[field.name])
        return cls(**values)

    @classmethod
    def from_json(cls, payload):
        """Entry point for response deserialization. Responses that aren't JSON objects
        (e.g. bare arrays) override it."""
        return cls.from_dict(payload)

    def to_dict(self):
        """
        Returns:
            dict: Every non-null field under its wire name.
        """
        return self._collect(lambda field: True)

    def to_body(self):
        """
        Returns:
            dict: Fields that go into a request body under their wire names.
        """
        return self._collect(lambda field: field.in_body)

    def replace(self, **changes):
        """
        Returns:
            `Model`: A new object with the given fields changed.
        """
        values = {attr: getattr(self, attr) for attr, _ in self.fields()}
        values.update(changes)
        return self.__class__(**values)

    def _collect(self, include):
        result = {}
        for attr, field in self.fields():
            value = getattr(self, attr)
            if value is None or not include(field):
                continue
            if field.omit_empty and _is_empty(value):
                continue
            result[field.name] = _obj_to_dict(value)
        return result

    def __setattr__(self, name, value):
        raise AttributeError('{} is immutable'.format(self.__class__.__name__))

    def __delattr__(self, name):
        raise AttributeError('{} is immutable'.format(self.__class__.__name__))

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return all(getattr(self, attr) == getattr(other, attr) for attr, _ in self.fields())
        else:
            return False

    def __repr__(self):
        """
        Helps investigating failing tests.
        """
        return '{}({})'.format(self.__class__.__name__, self.to_dict())


def _is_empty(value):
    return isinstance(value, (str, tuple, list, dict, MappingProxyType)) and not value


def _freeze(value):
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(element) for element in value)
    elif isinstance(value, (dict, MappingProxyType)):
        return MappingProxyType({key: _freeze(element) for key, element in value.items()})
    else:
        return value


def _obj_to_dict(obj):
    if isinstance(obj, Model):
        return obj.to_dict()
    elif isinstance(obj, (list, tuple)):
        return [_obj_to_dict(element) for element in obj]
    elif isinstance(obj, (dict, MappingProxyType)):
        return {key: _obj_to_dict(element) for key, element in obj.items()}
    elif isinstance(obj, enum.Enum):
        return obj.value
    else:
        return obj
