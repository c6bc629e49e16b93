"""Configuration models for encoding and import."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class EncodingConfig(BaseModel):
    """Base64 body encoding settings."""

    line_width: int = 76

    @field_validator("line_width")
    def validate_line_width(cls, v: int) -> int:
        # RFC 5322 caps a line at 998 characters
        if not 4 <= v <= 998:
            raise ValueError("line_width must be between 4 and 998")
        return v


class StorageConfig(BaseModel):
    """Storage configuration."""

    audit_log_path: str = "~/.emlkit/logs/audit.log"

    def get_audit_log_path(self) -> Path:
        """Get expanded audit log path."""
        return Path(self.audit_log_path).expanduser()


class AppConfig(BaseModel):
    """Main application configuration."""

    schema_version: str = "1.0"
    encoding: EncodingConfig = Field(default_factory=EncodingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    @field_validator("schema_version")
    def validate_schema_version(cls, v: str) -> str:
        if not v:
            raise ValueError("schema_version is required")
        return v
