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
CLI for cfclient.
"""

from concurrent.futures import TimeoutError as FutureTimeoutError
import logging
import sys

import click
import yaml

import cfclient
from .client import connect
from .config import DEFAULT_CONFIG_FILE, load_config
from .errors import CfClientError
from .pagination import collect_resources
from .uaa.identity_zones import ListIdentityZonesRequest
from .v2.application_usage_events import (ListApplicationUsageEventsRequest,
                                          PurgeAndReseedApplicationUsageEventsRequest)
from .v2.applications import ListApplicationsRequest
from .v2.blobstores import DeleteBlobstoreBuildpackCachesRequest
from .v2.info import GetInfoRequest
from .v2.jobs import wait_for_completion

DEFAULT_TIMEOUT = 60
DEFAULT_JOB_TIMEOUT = 300

_log = logging.getLogger(__name__) #pylint: disable=invalid-name


@click.group()
@click.option('-v', '--verbose', is_flag=True,
              help='Enable debug output.')
@click.option('-c', '--config', 'config_path',
              default=DEFAULT_CONFIG_FILE, show_default=True,
              help='Path to the YAML file with connection configuration. CF_* environment '
                   'variables fill in what the file lacks.')
@click.pass_context
def cli(ctx, verbose, config_path):
    """
    cfclient - talking to Cloud Foundry API without CF CLI.
    """
    if verbose:
        _setup_logging(logging.DEBUG)
    else:
        _setup_logging(logging.INFO)
    ctx.obj = {'config_path': config_path}


@cli.command()
@click.pass_context
def info(ctx):
    """
    Show information about the Cloud Controller.
    """
    response = _with_client(ctx, lambda client: _wait(client.info().get(GetInfoRequest())))
    _echo(response.to_dict())


@cli.command('usage-events')
@click.option('--after-guid',
              help='Only list the events created after the one with this GUID.')
@click.option('--results-per-page', type=int,
              help='Size of a page of events.')
@click.option('--all', 'all_pages', is_flag=True,
              help='List the events from all pages, not only the first one.')
@click.pass_context
def usage_events(ctx, after_guid, results_per_page, all_pages):
    """
    List application usage events.
    """
    def _list(client):
        def _page(page):
            return client.application_usage_events().list(ListApplicationUsageEventsRequest(
                after_application_usage_event_id=after_guid,
                page=page,
                results_per_page=results_per_page))
        if all_pages:
            return collect_resources(_page, DEFAULT_TIMEOUT)
        return _wait(_page(1)).resources or []

    _echo([event.to_dict() for event in _with_client(ctx, _list)])


@cli.command('purge-usage-events')
@click.confirmation_option(prompt='All application usage events will be destroyed. Continue?')
@click.pass_context
def purge_usage_events(ctx):
    """
    Destroy all application usage events and create new ones for the started applications.
    """
    _with_client(ctx, lambda client: _wait(client.application_usage_events().purge_and_reseed(
        PurgeAndReseedApplicationUsageEventsRequest())))
    _log.info('Application usage events purged and reseeded.')


@cli.command()
@click.option('-n', '--name', 'names', multiple=True,
              help='Only list applications with this name. Can be repeated.')
@click.option('-s', '--space-guid', 'space_ids', multiple=True,
              help='Only list applications from the space with this GUID. Can be repeated.')
@click.pass_context
def apps(ctx, names, space_ids):
    """
    List applications from all pages.
    """
    def _list(client):
        return collect_resources(
            lambda page: client.applications().list(ListApplicationsRequest(
                names=list(names), space_ids=list(space_ids), page=page)),
            DEFAULT_TIMEOUT)

    _echo([app.to_dict() for app in _with_client(ctx, _list)])


@cli.command('delete-buildpack-caches')
@click.option('-t', '--timeout', type=int,
              default=DEFAULT_JOB_TIMEOUT, show_default=True,
              help='Seconds to wait for the deletion job.')
@click.pass_context
def delete_buildpack_caches(ctx, timeout):
    """
    Delete buildpack caches of all applications and wait for it to finish.
    """
    def _delete(client):
        job = _wait(client.blobstores().delete_buildpack_caches(
            DeleteBlobstoreBuildpackCachesRequest()))
        return wait_for_completion(client, timeout, job)

    job = _with_client(ctx, _delete)
    _log.info('Buildpack caches deleted (job %s).', job.entity.id)


@cli.command('identity-zones')
@click.pass_context
def identity_zones(ctx):
    """
    List UAA identity zones.
    """
    def _list(client):
        uaa = client.uaa(ctx.obj['context'].uaa_url, DEFAULT_TIMEOUT)
        return _wait(uaa.identity_zones().list(ListIdentityZonesRequest()))

    response = _with_client(ctx, _list)
    _echo([zone.to_dict() for zone in response.identity_zones or ()])


def _with_client(ctx, action):
    """Runs an action with a client connected as the configuration says.

    Args:
        ctx (`click.Context`): Context of the command.
        action (callable): Function taking `cfclient.client.CloudFoundryClient`.

    Returns:
        object: What the action returned.
    """
    try:
        context = load_config(ctx.obj['config_path'])
        ctx.obj['context'] = context
        with connect(context, DEFAULT_TIMEOUT) as client:
            return action(client)
    except CfClientError as ex:
        raise click.ClickException(str(ex))
    except FutureTimeoutError:
        raise click.ClickException('Cloud Foundry did not respond in {} seconds.'
                                   .format(DEFAULT_TIMEOUT))


def _wait(deferred):
    """Blocks on the result of an operation. A call that takes too long is cancelled.

    Raises:
        concurrent.futures.TimeoutError: The result didn't come in `DEFAULT_TIMEOUT` seconds.
    """
    try:
        return deferred.block(DEFAULT_TIMEOUT)
    except FutureTimeoutError:
        deferred.cancel()
        raise


def _echo(data):
    click.echo(yaml.safe_dump(data, default_flow_style=False))


def _setup_logging(level):
    log_formatter = logging.Formatter(
        '%(asctime)s-%(levelname)s-%(name)s: %(message)s',
        '%H:%M:%S')
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(log_formatter)

    project_logger = logging.getLogger(cfclient.__name__)
    project_logger.setLevel(level)
    project_logger.handlers = [handler]
