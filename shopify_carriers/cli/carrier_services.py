# shopify_carriers/cli/carrier_services.py
import json
import logging
import click

from shopify_carriers.core.exceptions import ShopifyServiceError
from shopify_carriers.core.logging_config import configure_logging
from shopify_carriers.schemas.carrier import CarrierResource
from shopify_carriers.services.shopify import CarrierServiceClient, ShopifyRestClient

logger = logging.getLogger(__name__)


def _echo_json(data):
    click.echo(json.dumps(data, indent=2))


def _carrier_options(func):
    """Options shared by create and update."""
    options = [
        click.option('--name', help='Name shown to merchants and customers'),
        click.option('--callback-url', help='Public URL Shopify calls for rates'),
        click.option('--format', 'format_', type=click.Choice(['json', 'xml']), help='Callback data format'),
        click.option('--carrier-service-type', help='Carrier service type, e.g. api'),
        click.option('--active/--inactive', default=None, help='Whether the carrier service is active'),
        click.option('--service-discovery/--no-service-discovery', default=None,
                     help='Allow merchants to preview rates with dummy data'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _carrier_from_options(carrier_id=None, **kwargs) -> CarrierResource:
    return CarrierResource(
        id=carrier_id,
        name=kwargs.get('name'),
        callback_url=kwargs.get('callback_url'),
        format=kwargs.get('format_'),
        carrier_service_type=kwargs.get('carrier_service_type'),
        active=kwargs.get('active'),
        service_discovery=kwargs.get('service_discovery'),
    )


def _run(ctx, operation):
    try:
        return operation(ctx.obj['carriers'])
    except ShopifyServiceError as e:
        logger.debug("Carrier service command failed", exc_info=True)
        raise click.ClickException(str(e))


@click.group()
@click.option('--shop', envvar='SHOPIFY_SHOP_URL', help='Shop name or myshopify domain')
@click.option('--token', envvar='SHOPIFY_ADMIN_API_ACCESS_TOKEN', help='Admin API access token')
@click.option('--api-version', envvar='SHOPIFY_API_VERSION', help='Admin API version, e.g. 2024-01')
@click.option('--log-level', default=None, help='Override LOG_LEVEL')
@click.pass_context
def cli(ctx, shop, token, api_version, log_level):
    """Manage Shopify carrier services"""
    configure_logging(log_level)
    ctx.ensure_object(dict)
    if 'carriers' not in ctx.obj:
        try:
            client = ShopifyRestClient(shop_url=shop, access_token=token, api_version=api_version)
        except ValueError as e:
            raise click.UsageError(str(e))
        ctx.obj['carriers'] = CarrierServiceClient(client)


@cli.command(name='list')
@click.pass_context
def list_carriers(ctx):
    """List carrier services"""
    carriers = _run(ctx, lambda svc: svc.list())
    _echo_json([c.to_payload() for c in carriers])


@cli.command(name='get')
@click.argument('carrier_id', type=int)
@click.pass_context
def get_carrier(ctx, carrier_id):
    """Show one carrier service"""
    carrier = _run(ctx, lambda svc: svc.get(carrier_id))
    _echo_json(carrier.to_payload() if carrier else None)


@cli.command(name='create')
@_carrier_options
@click.pass_context
def create_carrier(ctx, **kwargs):
    """Create a carrier service"""
    carrier = _carrier_from_options(**kwargs)
    created = _run(ctx, lambda svc: svc.create(carrier))
    _echo_json(created.to_payload() if created else None)


@cli.command(name='update')
@click.argument('carrier_id', type=int)
@_carrier_options
@click.pass_context
def update_carrier(ctx, carrier_id, **kwargs):
    """Update a carrier service; only the options given are sent"""
    carrier = _carrier_from_options(carrier_id=carrier_id, **kwargs)
    updated = _run(ctx, lambda svc: svc.update(carrier))
    _echo_json(updated.to_payload() if updated else None)


@cli.command(name='delete')
@click.argument('carrier_id', type=int)
@click.confirmation_option(prompt='Delete this carrier service?')
@click.pass_context
def delete_carrier(ctx, carrier_id):
    """Delete a carrier service"""
    _run(ctx, lambda svc: svc.delete(carrier_id))
    click.echo(f"Deleted carrier service {carrier_id}")
