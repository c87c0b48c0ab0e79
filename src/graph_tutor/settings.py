from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TutorSettings(BaseSettings):
    """Process-wide configuration, read once at startup.

    Environment variables are prefixed with GRAPH_TUTOR_. The Neo4j fields
    also accept the bare NEO4J_* names for quick deploys.
    """

    model_config = SettingsConfigDict(
        env_prefix="GRAPH_TUTOR_", extra="ignore", populate_by_name=True
    )

    # HTTP
    bind_host: str = "0.0.0.0"
    bind_port: int = 3000

    # Logging
    log_level: str = "INFO"

    # Graph DB (Neo4j)
    neo4j_uri: str | None = Field(
        default=None, validation_alias=AliasChoices("GRAPH_TUTOR_NEO4J_URI", "NEO4J_URI")
    )
    neo4j_user: str | None = Field(
        default=None, validation_alias=AliasChoices("GRAPH_TUTOR_NEO4J_USER", "NEO4J_USER")
    )
    neo4j_password: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GRAPH_TUTOR_NEO4J_PASSWORD", "NEO4J_PASSWORD"),
    )
    neo4j_database: str = Field(
        default="neo4j",
        validation_alias=AliasChoices("GRAPH_TUTOR_NEO4J_DATABASE", "NEO4J_DATABASE"),
    )
    neo4j_max_transaction_retry_time: float = Field(
        default=0.0,
        description="Seconds the driver may spend retrying managed transactions. 0 disables retry.",
    )

    # Word import
    import_batch_size: int = 500


settings = TutorSettings()
