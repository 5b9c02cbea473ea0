from dotenv import load_dotenv

from shopify_carriers.cli.carrier_services import cli


def main():
    # Load environment variables from .env file
    load_dotenv()
    cli(obj={})
