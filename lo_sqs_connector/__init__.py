"""Live Objects to AWS SQS bridge connector."""
