from aws_cdk import (
    Stack,
    RemovalPolicy,
    aws_dynamodb as ddb,
)
from constructs import Construct

class EventsDdbStack(Stack):
    def __init__(self, scope: Construct, construct_id: str,
                 table_name: str = "events",
                 **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Product events, one partition per product, expired through ttl
        self.table = ddb.Table(self, "EventsDdb",
                               table_name=table_name,
                               partition_key=ddb.Attribute(name="pk", type=ddb.AttributeType.STRING),
                               sort_key=ddb.Attribute(name="sk", type=ddb.AttributeType.STRING),
                               time_to_live_attribute="ttl",
                               billing_mode=ddb.BillingMode.PROVISIONED,
                               read_capacity=1,
                               write_capacity=1,
                               removal_policy=RemovalPolicy.DESTROY)
