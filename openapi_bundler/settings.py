"""
Runtime settings for the OpenAPI bundler.

Settings can be configured via:
- Environment variables (prefixed with OPENAPI_BUNDLER_)
- .env file in the working directory
- Direct instantiation with parameters
- Runtime override using the override() method

CLI options take precedence over these values for a single invocation.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


__all__ = [
    "OUTPUT_FORMATS",
    "BundlerSettings",
    "bundler_settings",
]


OUTPUT_FORMATS = ("yaml", "json", "both")


class BundlerSettings(BaseSettings):
    """
    Application settings for the OpenAPI bundler.

    Attributes:
        input_file: Name of the root document inside the input directory
        output_format: Serialization of the bundle - yaml, json or both
        output_file: Output file name without extension
        max_passes: Number of extra passes over the components registry. Each pass
                    resolves one more level of reference-to-reference nesting.
        validate_output: Validate input and written files with openapi-spec-validator
        debug: Enable debug logging
    """

    input_file: str = Field("openapi.yaml", description="Root document file name")

    output_format: str = Field("yaml", description="Output format: yaml, json or both")

    output_file: str = Field("openapi.bundled", description="Output file name without extension")

    max_passes: int = Field(3, ge=0, description="Extra resolution passes over the components registry")

    validate_output: bool = Field(True, description="Validate input and bundled files")

    debug: bool = Field(False, description="Enable debug logging")

    @field_validator("output_format", mode="before")
    @classmethod
    def normalize_output_format(cls, v):
        # type: (str) -> str
        """
        Lowercase the output format and reject unknown values.

        :param v: Output format as given (e.g. "YAML", "Both")
        :return: Normalized output format
        """
        v = str(v).strip().lower()
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got '{v}'")
        return v

    model_config = SettingsConfigDict(
        env_prefix="OPENAPI_BUNDLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    def override(self, update=None):
        # type: (dict|None) -> BundlerSettings
        """
        Returns an updated and validated deep copy of the current settings instance.

        :param update: Dictionary of field names and values to override. None values are skipped.
        :return: New BundlerSettings instance with updated and validated fields.
        """
        update = update or {}

        settings = self.model_copy(deep=True)
        # We need update fields individually so validation gets triggered
        for field, value in update.items():
            if value is not None:
                setattr(settings, field, value)
        return settings


bundler_settings = BundlerSettings()
