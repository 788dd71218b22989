"""Synchronous invocation of the products events function.

Used by the products admin function after it creates, updates or deletes a
product. The events function name comes from ``PRODUCTS_EVENTS_FUNCTION_NAME``.
"""
from aws_xray_sdk.core import patch

patch(["boto3"])

import os, json, logging
from decimal import Decimal
from typing import Any, Dict
import boto3

from product_event import ProductEvent, ProductEventType

logger = logging.getLogger()

_lambda_client = None


class ProductEventError(Exception):
    """The events function returned a function error."""

    def __init__(self, payload: Dict[str, Any]):
        self.payload = payload
        super().__init__(payload.get("errorMessage") or json.dumps(payload))


def get_lambda_client():
    global _lambda_client
    if _lambda_client is None:
        _lambda_client = boto3.client("lambda")
    return _lambda_client


def reset_lambda_client() -> None:
    global _lambda_client
    _lambda_client = None


def _to_number(value: Any) -> Any:
    # boto3 resource reads return Decimal, which json can't encode
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value


def build_product_event(product: Dict[str, Any], event_type: ProductEventType,
                        email: str, request_id: str) -> ProductEvent:
    return {
        "email": email,
        "productId": product["id"],
        "productCode": product["code"],
        "productPrice": _to_number(product["price"]),
        "requestId": request_id,
        "eventType": ProductEventType(event_type),
    }


def send_product_event(product: Dict[str, Any], event_type: ProductEventType,
                       email: str, request_id: str) -> Dict[str, Any]:
    event = build_product_event(product, event_type, email, request_id)
    resp = get_lambda_client().invoke(
        FunctionName=os.environ["PRODUCTS_EVENTS_FUNCTION_NAME"],
        InvocationType="RequestResponse",
        Payload=json.dumps(event).encode(),
    )
    body = json.loads(resp["Payload"].read() or b"{}")
    if resp.get("FunctionError"):
        raise ProductEventError(body)

    logger.info(json.dumps({
        "event": "product_event_sent",
        "request_id": request_id,
        "product_id": event["productId"],
        "event_type": str(event["eventType"]),
    }))
    return body
