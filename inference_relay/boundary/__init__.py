"""
Boundary layer for external system integrations.

Handles all interactions with AWS (Bedrock agent runtime and S3).
Provides adapters and clients for infrastructure dependencies.
"""
