from aws_xray_sdk.core import patch

# Trace DynamoDB calls as X-Ray subsegments
patch(["boto3"])

import os, json, time, logging
from decimal import Decimal
from typing import Any, Dict, Optional
import boto3

from product_event import ProductEvent

EVENTS_DDB = os.environ["EVENTS_DDB"]

logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO"))

# expiry = write time + 5 + 60 seconds
TTL_SECONDS = 5 + 60
# ms timestamps stay 13 digits wide until 2286
TIMESTAMP_WIDTH = 13

_table = None


def get_table():
    global _table
    if _table is None:
        _table = boto3.resource("dynamodb").Table(EVENTS_DDB)
    return _table


def reset_table() -> None:
    global _table
    _table = None


def _now_ms() -> int:
    return int(time.time() * 1000)


def _to_decimal(value: Any) -> Any:
    if isinstance(value, float):
        return Decimal(str(value))
    return value


def build_event_record(event: ProductEvent, timestamp: int) -> Dict[str, Any]:
    """Item written to the events table for one product event.

    Records of one product share the partition ``#product_<code>`` and sort
    by ``<eventType>#<timestamp>``.
    """
    event_type = str(event["eventType"])
    return {
        "pk": f"#product_{event['productCode']}",
        "sk": f"{event_type}#{timestamp:0{TIMESTAMP_WIDTH}d}",
        "email": event.get("email"),
        "createdAt": timestamp,
        "requestId": event.get("requestId"),
        "eventType": event_type,
        "info": {
            "productId": event.get("productId"),
            "price": _to_decimal(event.get("productPrice")),
        },
        "ttl": timestamp // 1000 + TTL_SECONDS,
    }


def create_event(event: ProductEvent, timestamp: Optional[int] = None) -> Dict[str, Any]:
    if timestamp is None:
        timestamp = _now_ms()
    item = build_event_record(event, timestamp)
    get_table().put_item(Item=item)
    return item


def handler(event: ProductEvent, context):
    request_id = getattr(context, "aws_request_id", None)
    logger.info(json.dumps({
        "event": "product_event_received",
        "request_id": request_id,
        "payload": event,
    }, default=str))

    try:
        item = create_event(event)
    except Exception as e:
        logger.error(json.dumps({
            "event": "product_event_failed",
            "request_id": request_id,
            "error_type": type(e).__name__,
            "error_message": str(e),
        }))
        raise

    logger.info(json.dumps({
        "event": "product_event_created",
        "request_id": request_id,
        "pk": item["pk"],
        "sk": item["sk"],
    }))
    return {"productEventCreated": True, "message": "OK"}
