import os
from aws_cdk import (
    Stack,
    Duration,
    BundlingOptions,
    RemovalPolicy,
    aws_lambda as _lambda,
    aws_dynamodb as ddb,
    aws_iam as iam,
    aws_logs as logs,
)
from constructs import Construct

FUNCTIONS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "..", "functions")

class ProductsAppStack(Stack):
    def __init__(self, scope: Construct, construct_id: str,
                 events_ddb: ddb.ITable,
                 table_name: str = "products",
                 enable_xray: bool = True,
                 **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.products_ddb = ddb.Table(self, "ProductsDdb",
                                      table_name=table_name,
                                      partition_key=ddb.Attribute(name="id", type=ddb.AttributeType.STRING),
                                      billing_mode=ddb.BillingMode.PROVISIONED,
                                      read_capacity=1,
                                      write_capacity=1,
                                      removal_policy=RemovalPolicy.DESTROY)

        # Function code plus requirements.txt (X-Ray SDK), built in the runtime image
        runtime = _lambda.Runtime.PYTHON_3_12
        bundling = BundlingOptions(image=runtime.bundling_image,
                                   command=["bash", "-c",
                                            "pip install -r requirements.txt -t /asset-output && cp -au . /asset-output"])

        # Products events recorder, invoked synchronously by the admin function
        self.products_events_handler = _lambda.Function(self, "ProductsEventsFunction",
                                                        function_name="ProductsEventsFunction",
                                                        runtime=runtime,
                                                        handler="products_events.handler",
                                                        code=_lambda.Code.from_asset(FUNCTIONS_DIR, bundling=bundling),
                                                        memory_size=128,
                                                        timeout=Duration.seconds(2),
                                                        environment={
                                                            "EVENTS_DDB": events_ddb.table_name
                                                        },
                                                        tracing=_lambda.Tracing.ACTIVE if enable_xray else _lambda.Tracing.DISABLED,
                                                        insights_version=_lambda.LambdaInsightsVersion.VERSION_1_0_119_0,
                                                        log_retention=logs.RetentionDays.TWO_WEEKS)

        events_ddb.grant_write_data(self.products_events_handler)

        self.products_events_function_name = self.products_events_handler.function_name

    def grant_events_invoke(self, grantee: iam.IGrantable) -> iam.Grant:
        """Let a products function publish events through the recorder."""
        return self.products_events_handler.grant_invoke(grantee)
