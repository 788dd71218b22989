#!/usr/bin/env python3
import os
import aws_cdk as cdk
from stacks.events_ddb_stack import EventsDdbStack
from stacks.products_app_stack import ProductsAppStack

app = cdk.App()

env = cdk.Environment(
    account=os.getenv("CDK_DEFAULT_ACCOUNT"),
    region=os.getenv("CDK_DEFAULT_REGION", "us-east-1")
)

# Product events audit table
events_ddb = EventsDdbStack(app, "EventsDdb",
                            env=env,
                            table_name="events")

# Products table + events recorder function
products_app = ProductsAppStack(app, "ProductsApp",
                                env=env,
                                events_ddb=events_ddb.table,
                                table_name="products",
                                enable_xray=True)
products_app.add_dependency(events_ddb)

app.synth()
