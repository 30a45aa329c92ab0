"""
Application layer.

Services that adapt internal calls to the Bedrock upstream.
"""
