"""
Bedrock agent and knowledge base settings.

Identifiers of the agent, knowledge base and model, plus the fixed
retrieval and inference parameters sent with every retrieve-and-generate
request.

Dependencies: pydantic_settings
System role: Bedrock upstream configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BedrockSettings(BaseSettings):
    """Settings for Bedrock agent runtime calls."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    agent_id: str = Field(
        default="",
        description="Bedrock agent identifier",
    )
    agent_alias_id: str = Field(
        default="",
        description="Bedrock agent alias identifier",
    )
    knowledge_base_id: str = Field(
        default="",
        description="Knowledge base queried by retrieve-and-generate",
    )
    model_arn: str = Field(
        default="",
        description="Foundation model ARN used for generation",
    )

    number_of_results: int = Field(
        default=5,
        description="Vector search results per query",
    )
    override_search_type: str = Field(
        default="HYBRID",
        description="Vector search mode (HYBRID or SEMANTIC)",
    )
    temperature: float = Field(default=0.0, description="Sampling temperature")
    top_p: float = Field(default=1.0, description="Nucleus sampling threshold")
    top_k: int = Field(default=250, description="Top-k sampling cutoff")
    max_tokens: int = Field(default=2048, description="Maximum generated tokens")
