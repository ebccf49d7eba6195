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

import json
import os

import requests

API_ROOT = 'https://api.example.com'
UAA_ROOT = 'https://uaa.example.com'


def get_cfclient_resource(resource_name):
    resource_dir = os.path.join(_get_resource_dir(), 'cfclient')
    return os.path.join(resource_dir, resource_name)


def load_cfclient_resource(resource_name):
    with open(get_cfclient_resource(resource_name)) as resource_file:
        return json.load(resource_file)


def make_response(status_code=200, body=None, reason='OK'):
    """Builds a response with its body already read, like the ones the session gives back.

    Args:
        status_code (int): HTTP status of the response.
        body (object): Decoded JSON body, or a string sent as it is. No body if None.
        reason (str): HTTP reason phrase.
    """
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = 'utf-8'
    if body is None:
        content = b''
    elif isinstance(body, str):
        content = body.encode('utf-8')
    else:
        content = json.dumps(body).encode('utf-8')
        response.headers['Content-Type'] = 'application/json'
    response._content = content # pylint: disable=protected-access
    response._content_consumed = True # pylint: disable=protected-access
    return response


def _get_resource_dir():
    test_dir = os.path.realpath(os.path.dirname(__file__))
    return os.path.join(test_dir, 'resources')
