"""
Shared pytest fixtures.

DynamoDB is mocked in-process with moto; no AWS account is needed.
Environment variables are set at import time, before the function modules
read them.
"""
import os
import pytest

os.environ["EVENTS_DDB"] = "events"
os.environ["PRODUCTS_EVENTS_FUNCTION_NAME"] = "ProductsEventsFunction"
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
# no X-Ray daemon outside Lambda; patch() is a no-op while disabled
os.environ["AWS_XRAY_SDK_ENABLED"] = "false"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ.pop("AWS_PROFILE", None)


class LambdaContext:
    def __init__(self, aws_request_id="lambda-request-1"):
        self.aws_request_id = aws_request_id
        self.function_name = "ProductsEventsFunction"


@pytest.fixture
def lambda_context():
    return LambdaContext()


@pytest.fixture
def mock_dynamodb():
    """Mocked DynamoDB with no tables; the cached table resource is dropped."""
    from moto import mock_aws
    import products_events

    products_events.reset_table()
    with mock_aws():
        yield
        products_events.reset_table()


@pytest.fixture
def events_table(mock_dynamodb):
    """The events table, keyed the way EventsDdbStack declares it."""
    import boto3

    table = boto3.resource("dynamodb").create_table(
        TableName=os.environ["EVENTS_DDB"],
        KeySchema=[
            {"AttributeName": "pk", "KeyType": "HASH"},
            {"AttributeName": "sk", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "pk", "AttributeType": "S"},
            {"AttributeName": "sk", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    table.wait_until_exists()
    return table


@pytest.fixture
def product_event():
    return {
        "productCode": "P1",
        "eventType": "PRODUCT_CREATED",
        "productId": "1",
        "productPrice": 10,
        "email": "a@b.com",
        "requestId": "r1",
    }
