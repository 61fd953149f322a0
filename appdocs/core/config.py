"""Application configuration loaded from environment variables.

Settings for document content (support contact, signature, tax rate),
template resolution, and PDF rendering. Uses pydantic-settings for
validation and .env file support.
"""

from decimal import Decimal
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Packaged templates directory, exposed as a file:// URI with a trailing slash
# so template path fragments can be appended directly.
_PACKAGE_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
DEFAULT_TEMPLATE_BASE_URI = _PACKAGE_TEMPLATES_DIR.as_uri() + "/"

DEFAULT_TEMPLATE_PATHS: dict[str, str] = {
    "PendingApplication": "pending_application.html",
    "ActivatedApplication": "activated_application.html",
    "InReviewApplication": "in_review_application.html",
}

# Header markup stamped on generated documents (first page only by default).
DEFAULT_PDF_HEADER_HTML = "<b>Application Services</b> | Confidential"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Document content
    support_email: str = "support@example.com"
    signature: str = "The Applications Team"
    tax_rate: Decimal = Decimal("0.2")

    # Templates
    template_base_uri: str = DEFAULT_TEMPLATE_BASE_URI
    template_paths: dict[str, str] = DEFAULT_TEMPLATE_PATHS

    # PDF rendering
    pdf_header_html: str = DEFAULT_PDF_HEADER_HTML

    # Data source (JSON file of application records, optional)
    data_file: Path | None = None

    # Application
    environment: str = "development"
    log_level: str = "INFO"

    @model_validator(mode="after")
    def check_document_settings(self) -> "Settings":
        """Validate document configuration invariants.

        Checks:
        - Tax rate is a fraction between 0 and 1 (inclusive)
        - Support email is present
        - Template base URI is present
        """
        if not Decimal(0) <= self.tax_rate <= Decimal(1):
            msg = f"TAX_RATE must be between 0 and 1. Got: {self.tax_rate}"
            raise ValueError(msg)

        if not self.support_email.strip():
            msg = "SUPPORT_EMAIL must not be empty."
            raise ValueError(msg)

        if not self.template_base_uri:
            msg = "TEMPLATE_BASE_URI must not be empty."
            raise ValueError(msg)

        return self


settings = Settings()
