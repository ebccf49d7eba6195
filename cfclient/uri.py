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
Building request URIs out of the server's root URI.
"""

from urllib.parse import quote, urlencode, urlsplit, urlunsplit


class UriBuilder:
    """Composes a root URI with path segments and query parameters.

        UriBuilder('https://api.example.com').path_segment('v2', 'apps', guid).build()
    """

    def __init__(self, root):
        """
        Args:
            root (str): Root URI of the server, e.g. "https://api.run.pivotal.io".
                It can have a path of its own.
        """
        self._root = root
        self._segments = []
        self._query = []

    def path_segment(self, *segments):
        """Appends path segments. Each one is percent-encoded, so "/" can't split it.

        Returns:
            `UriBuilder`: self
        """
        self._segments.extend(str(segment) for segment in segments)
        return self

    def query_param(self, name, *values):
        """Appends a query parameter once per given value. Parameters keep the order they were
        added in.

        Returns:
            `UriBuilder`: self
        """
        self._query.extend((name, value) for value in values)
        return self

    @property
    def query_params(self):
        """
        Returns:
            list[tuple[str, str]]: Query parameters added so far.
        """
        return list(self._query)

    def build(self):
        """
        Returns:
            str: The complete URI.
        """
        scheme, netloc, path, query, _ = urlsplit(self._root)
        path_parts = [part for part in path.split('/') if part]
        path_parts.extend(quote(segment, safe='') for segment in self._segments)
        query_parts = [part for part in [query, urlencode(self._query)] if part]
        return urlunsplit((scheme, netloc, '/' + '/'.join(path_parts), '&'.join(query_parts), ''))
