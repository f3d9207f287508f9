from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LinkedGraphSettings(BaseSettings):
    """Unified configuration for ldgraph.

    Environment variables are prefixed with LDGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="LDGRAPH_", extra="ignore")

    # --- Core ---
    log_level: str = Field(default="INFO", description="Python logging level")

    # --- Ontology namespaces ---
    ontology_base: str = Field(default="http://sample.domain/ontologies/")
    core_namespace: str = Field(default="core#", description="Namespace for keys without a separator")
    display_namespace: str = Field(default="display#")

    # --- Endpoints ---
    domain: str = Field(default="http://sample.domain")
    api_root: str = Field(default="/api/v1")
    resource_path: str = Field(default="/meta/", description="Path segment of persistent locators")
    api_key: str | None = Field(default=None, description="If set, sent as X-API-Key")
    http_timeout_s: float = Field(default=60.0)

    # --- Local ids ---
    local_id_prefix: str = Field(default="_:stored")
    local_id_space: int = Field(default=10000, description="Random suffixes are drawn from [0, space)")
    max_local_id_attempts: int = Field(default=100000)

    # --- Collections ---
    element_key: str = Field(default="element")


settings = LinkedGraphSettings()
