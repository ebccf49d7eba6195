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
Single-value asynchronous results returned by every operation.
"""

from concurrent.futures import CancelledError, Future
import logging
import threading

_log = logging.getLogger(__name__) # pylint: disable=invalid-name


class Exchange:
    """Cancellation state of one HTTP exchange, shared between the caller and the worker
    carrying the exchange out."""

    def __init__(self):
        self._lock = threading.Lock()
        self._cancelled = False
        self._response = None

    @property
    def cancelled(self):
        return self._cancelled

    def cancel(self):
        """Marks the exchange as cancelled and closes the response that is being read, if any."""
        with self._lock:
            self._cancelled = True
            response, self._response = self._response, None
        if response is not None:
            _log.debug('Closing in-flight response of a cancelled exchange')
            response.close()

    def attach(self, response):
        """Registers the response being read, so it can be closed by `cancel`.

        Args:
            response (`requests.Response`): Response whose body wasn't read yet.

        Returns:
            bool: False if the exchange was already cancelled. The response is closed then.
        """
        with self._lock:
            if not self._cancelled:
                self._response = response
                return True
        response.close()
        return False

    def detach(self):
        with self._lock:
            self._response = None


class Deferred:
    """Result of an operation that completes exactly once with a value, with no value
    (empty success) or with an error.

        deferred = client.applications().get(GetApplicationRequest(application_id=guid))
        deferred.subscribe(on_success=print, on_error=_log.error)
        # or
        application = deferred.block(timeout=30)
    """

    def __init__(self, future, exchange=None):
        self._future = future
        self._exchange = exchange or Exchange()

    @classmethod
    def submit(cls, executor, work):
        """
        Args:
            executor (`concurrent.futures.Executor`): Where the work is run.
            work (callable): Function taking an `Exchange` and returning the result.

        Returns:
            `Deferred`: Result of the work.
        """
        exchange = Exchange()
        return cls(executor.submit(work, exchange), exchange)

    @classmethod
    def of(cls, value):
        """
        Returns:
            `Deferred`: Already completed with the given value.
        """
        future = Future()
        future.set_result(value)
        return cls(future)

    @classmethod
    def failed(cls, error):
        """
        Returns:
            `Deferred`: Already failed with the given error.
        """
        future = Future()
        future.set_exception(error)
        return cls(future)

    def cancel(self):
        """Cancels the operation. Its response isn't deserialized and no subscriber is notified.

        `requests` can't interrupt a request that is still connecting, sending or waiting for
        the response headers. Such a request runs on until the headers arrive and only then is
        the response closed, so the worker thread stays busy until that moment.
        A response whose body is being read is closed immediately.

        Returns:
            bool: False if the result was already there and couldn't be cancelled.
        """
        if self._future.done() and not self.cancelled():
            return False
        self._exchange.cancel()
        self._future.cancel()
        return True

    def cancelled(self):
        return self._exchange.cancelled or self._future.cancelled()

    def done(self):
        return self.cancelled() or self._future.done()

    def block(self, timeout=None):
        """Waits for the result.

        Args:
            timeout (float): Seconds to wait. Waits indefinitely if None.

        Returns:
            object: The value or None for an empty result.

        Raises:
            concurrent.futures.TimeoutError: The result didn't come in time.
            concurrent.futures.CancelledError: The operation was cancelled.
            `cfclient.errors.CfClientError`: The operation failed.
        """
        if self.cancelled():
            raise CancelledError()
        result = self._future.result(timeout)
        if self.cancelled():
            raise CancelledError()
        return result

    def subscribe(self, on_success=None, on_error=None, on_complete=None):
        """Registers callbacks for the result. They're called on the thread that completes the
        operation (or on the calling one if it's already complete).

        Args:
            on_success (callable): Called with the value, unless the result is empty.
            on_error (callable): Called with the error if the operation failed.
            on_complete (callable): Called without arguments after every successful completion.

        Returns:
            `Deferred`: self
        """
        def _notify(future):
            if self.cancelled():
                return
            error = future.exception()
            if error is not None:
                if on_error:
                    on_error(error)
                else:
                    _log.error('Unhandled operation failure: %s', error)
                return
            value = future.result()
            if value is not None and on_success:
                on_success(value)
            if on_complete:
                on_complete()

        self._future.add_done_callback(_notify)
        return self
