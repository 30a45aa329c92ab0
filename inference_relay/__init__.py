"""
Inference relay backend.

HTTP relay in front of AWS Bedrock agent and knowledge-base endpoints.
"""
