"""
Citation resolution.

Replaces every S3 reference in a retrieve-and-generate citation with a copy
carrying a presigned download URL. Resolution is all-or-nothing: one bad
reference fails the whole citation, and one bad citation fails the batch.

Dependencies: asyncio, inference_relay.boundary.aws
System role: Signed link enrichment for retrieval citations
"""

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Any

from inference_relay.boundary.aws.s3_client import S3DocumentClient
from inference_relay.core.exceptions import MalformedReferenceError
from inference_relay.models.retrieval import Citation, RetrievedReference

logger = logging.getLogger(__name__)

# Whole-string match: a trailing newline is part of the key.
_S3_URI = re.compile(r"s3://([^/]+)/(.*)", re.DOTALL)


@dataclass(frozen=True)
class S3Location:
    """Bucket and key of an S3 object."""

    bucket: str
    key: str


def parse_s3_uri(uri: Any) -> S3Location:
    """
    Parse an ``s3://bucket/key`` URI.

    Args:
        uri: URI taken from a reference's s3Location

    Returns:
        S3Location: Parsed bucket and key

    Raises:
        MalformedReferenceError: If uri is not a string, does not match
            the s3://bucket/key shape, or has an empty key
    """
    if not isinstance(uri, str):
        raise MalformedReferenceError(f"Input must be a string: {uri!r}", uri=uri)

    match = _S3_URI.fullmatch(uri)
    if not match or not match.group(1) or not match.group(2):
        raise MalformedReferenceError(f"Invalid S3 URI: {uri}", uri=uri)
    return S3Location(bucket=match.group(1), key=match.group(2))


class CitationResolver:
    """Attach presigned URLs to the references of retrieval citations."""

    def __init__(self, s3_client: S3DocumentClient, expires_in: int = 3600) -> None:
        """
        Initialize resolver.

        Args:
            s3_client: Client used to sign download URLs
            expires_in: Lifetime of each signed URL in seconds
        """
        self._s3_client = s3_client
        self._expires_in = expires_in

    async def resolve_citation(self, citation: Citation) -> Citation:
        """
        Resolve every reference of one citation concurrently.

        All locations are parsed before any URL is signed, so a malformed
        reference never yields a partially resolved citation.

        Args:
            citation: Citation as returned by the upstream

        Returns:
            Citation: New citation whose references carry signed_url,
                in the original order

        Raises:
            MalformedReferenceError: If any reference has no valid S3 URI
        """
        references = citation.retrieved_references
        locations = [parse_s3_uri(reference.s3_uri) for reference in references]

        resolved = await asyncio.gather(
            *(
                self._resolve_reference(reference, location)
                for reference, location in zip(references, locations)
            )
        )
        return citation.model_copy(update={"retrieved_references": list(resolved)})

    async def resolve_citations(self, citations: list[Citation]) -> list[Citation]:
        """Resolve all citations of a response concurrently, preserving order."""
        if not citations:
            return []
        logger.debug(
            f"{__name__}:resolve_citations - resolving {len(citations)} citations, "
            f"{sum(len(c.retrieved_references) for c in citations)} references"
        )
        return list(
            await asyncio.gather(
                *(self.resolve_citation(citation) for citation in citations)
            )
        )

    async def _resolve_reference(
        self,
        reference: RetrievedReference,
        location: S3Location,
    ) -> RetrievedReference:
        signed_url = await asyncio.to_thread(
            self._s3_client.generate_presigned_download_url,
            bucket=location.bucket,
            s3_key=location.key,
            expires_in=self._expires_in,
        )
        return reference.model_copy(update={"signed_url": signed_url})
