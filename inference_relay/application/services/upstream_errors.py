"""
Translation of botocore failures into relay exceptions.

Dependencies: botocore
System role: Upstream error mapping shared by the Bedrock services
"""

from botocore.exceptions import BotoCoreError, ClientError

from inference_relay.core.exceptions import UpstreamServiceError


def to_upstream_error(error: ClientError | BotoCoreError) -> UpstreamServiceError:
    """
    Build an UpstreamServiceError from a botocore exception.

    ClientError carries the service error code, message and HTTP status.
    BotoCoreError (connection, endpoint, credential failures) has none of
    them and is reported with its class name as code.

    Args:
        error: botocore exception raised by a client call

    Returns:
        UpstreamServiceError: Typed error carrying code, message and status
    """
    if isinstance(error, ClientError):
        error_info = error.response.get("Error", {})
        code = error_info.get("Code", "Unknown")
        message = error_info.get("Message") or str(error)
        status_code = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        return UpstreamServiceError(
            f"AWS Bedrock API error: {code} - {message}",
            code=code,
            status_code=status_code,
        )
    return UpstreamServiceError(
        f"AWS Bedrock API error: {type(error).__name__} - {error}",
        code=type(error).__name__,
    )
