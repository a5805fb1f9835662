import logging
from decimal import Decimal
from typing import Any

import boto3
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def get_dynamodb_table(
    table_name: str,
    region: str | None = None,
    endpoint_url: str | None = None,
):
    """Create a DynamoDB Table resource."""
    dynamodb = boto3.resource("dynamodb", region_name=region, endpoint_url=endpoint_url)
    return dynamodb.Table(table_name)


def get_events_client(region: str | None = None, endpoint_url: str | None = None):
    """Create EventBridge client."""
    return boto3.client("events", region_name=region, endpoint_url=endpoint_url)


def from_dynamodb_item(item: dict[str, Any]) -> dict[str, Any]:
    """Convert Decimal values returned by DynamoDB back to int/float."""
    converted = {}
    for key, value in item.items():
        if isinstance(value, Decimal):
            converted[key] = int(value) if value == value.to_integral_value() else float(value)
        elif isinstance(value, dict):
            converted[key] = from_dynamodb_item(value)
        else:
            converted[key] = value
    return converted
