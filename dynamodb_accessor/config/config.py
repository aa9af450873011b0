import os
from typing import Any, Dict, Optional

from botocore.config import Config
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Pick up a local .env before any defaults are read
load_dotenv()

VALID_ENVIRONMENTS = ['dev', 'test', 'staging', 'prod']
LOCAL_ENDPOINT_URL = "http://localhost:8000"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() == "true"


class DynamoDBConfig(BaseModel):
    """Where accessors connect to and how their tables are named.

    Every field falls back to an environment variable, so ``DynamoDBConfig()``
    is usually all a deployed service needs. Retries and timeouts are passed
    to botocore; accessors themselves never retry.
    """

    # Credentials and endpoint
    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID; None defers to the default credential chain"
    )
    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )
    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="Region the DynamoDB client is created in"
    )
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="Override endpoint, e.g. DynamoDB Local or LocalStack"
    )

    # Table naming
    table_prefix: str = Field(
        default_factory=lambda: os.getenv("DYNAMODB_TABLE_PREFIX", ""),
        description="Prefix joined in front of every accessor's table name"
    )
    environment: str = Field(
        default_factory=lambda: os.getenv("ENVIRONMENT", "dev"),
        description="Deployment environment, part of non-prod table names"
    )

    # botocore client settings
    max_pool_connections: int = Field(
        default_factory=lambda: os.getenv("DYNAMODB_MAX_POOL_CONNECTIONS", 50),
        validate_default=True,
        description="HTTP connection pool size shared by concurrent operations"
    )
    retries: int = Field(
        default_factory=lambda: os.getenv("DYNAMODB_RETRIES", 3),
        validate_default=True,
        description="max_attempts handed to botocore's retry handler"
    )
    timeout_seconds: float = Field(
        default_factory=lambda: os.getenv("DYNAMODB_TIMEOUT_SECONDS", 30.0),
        validate_default=True,
        description="Connect and read timeout for each request"
    )

    enable_debug_logging: bool = Field(
        default_factory=lambda: _env_flag("DYNAMODB_DEBUG_LOGGING"),
        description="Switch the dynamodb_accessor loggers to DEBUG when a client is created"
    )

    model_config = ConfigDict(
        validate_assignment=True,
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @field_validator('environment')
    @classmethod
    def validate_environment(cls, v):
        """Validate environment value."""
        if v not in VALID_ENVIRONMENTS:
            raise ValueError(f"Environment must be one of: {VALID_ENVIRONMENTS}")
        return v

    @field_validator('retries', 'max_pool_connections', 'timeout_seconds')
    @classmethod
    def validate_non_negative(cls, v):
        """Validate that connection settings are not negative."""
        if v < 0:
            raise ValueError("Connection settings must not be negative")
        return v

    def get_table_name(self, base_name: str) -> str:
        """Physical table name for ``base_name``.

        Prefix, environment and base name joined with underscores; the
        environment is left out in prod, e.g. ``app_dev_notes`` / ``app_notes``.
        """
        environment = None if self.environment == "prod" else self.environment
        return "_".join(part for part in (self.table_prefix, environment, base_name) if part)

    def client_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``session.create_client('dynamodb', ...)``."""
        kwargs = {
            'region_name': self.region_name,
            'aws_access_key_id': self.aws_access_key_id,
            'aws_secret_access_key': self.aws_secret_access_key,
            'config': self.botocore_config(),
        }
        if self.endpoint_url:
            kwargs['endpoint_url'] = self.endpoint_url
        return kwargs

    def botocore_config(self) -> Config:
        """botocore Config carrying retries, pool size and timeouts."""
        return Config(
            retries={'max_attempts': self.retries},
            max_pool_connections=self.max_pool_connections,
            read_timeout=self.timeout_seconds,
            connect_timeout=self.timeout_seconds
        )

    @classmethod
    def from_env(cls) -> 'DynamoDBConfig':
        """Build a configuration purely from environment variables."""
        return cls()

    @classmethod
    def for_local_development(cls, endpoint_url: str = LOCAL_ENDPOINT_URL) -> 'DynamoDBConfig':
        """Configuration for DynamoDB Local with dummy credentials.

        Args:
            endpoint_url: Local endpoint, http://localhost:8000 by default

        Returns:
            DynamoDBConfig for the dev environment with debug logging on
        """
        return cls(
            aws_access_key_id="local",
            aws_secret_access_key="local",
            region_name="us-east-1",
            endpoint_url=endpoint_url,
            environment="dev",
            enable_debug_logging=True
        )
