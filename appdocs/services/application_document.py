"""Application document generation service.

Generates the PDF document for an application. The application's state
selects a view builder; the builder resolves its template, populates a
state-specific view model and renders it to markup; the markup is then
rendered to PDF with fixed options.

State dispatch:
    PENDING    -> PendingApplicationViewBuilder
    ACTIVATED  -> ActivatedApplicationViewBuilder
    IN_REVIEW  -> InReviewApplicationViewBuilder
    other      -> no document

Outcomes:
    GENERATED          PDF bytes returned
    NOT_FOUND          no application with the id (warning logged)
    UNSUPPORTED_STATE  state has no document (warning logged)

Collaborator failures and DataIntegrityError propagate to the caller.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Protocol

from appdocs.core.config import DEFAULT_PDF_HEADER_HTML
from appdocs.core.errors import DataIntegrityError
from appdocs.models.application import (
    Application,
    ApplicationState,
    Fund,
    LegalEntity,
    Person,
)
from appdocs.providers.base import (
    ApplicationDataProvider,
    DocumentRenderer,
    HeaderOptions,
    HeaderRepeat,
    PageNumbers,
    PdfOptions,
    TemplatePathProvider,
    ViewRenderer,
)
from appdocs.services.in_review_message import build_in_review_message
from appdocs.services.view_models import (
    ActivatedApplicationViewModel,
    InReviewApplicationViewModel,
    PendingApplicationViewModel,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Protocol Definition
# =============================================================================


class DocumentConfigurationLike(Protocol):
    """Read-only configuration values copied into documents."""

    @property
    def support_email(self) -> str:
        """Support contact shown on documents."""
        ...

    @property
    def signature(self) -> str:
        """Sign-off text shown on documents."""
        ...

    @property
    def tax_rate(self) -> Decimal:
        """Fraction applied to net fund amounts."""
        ...


# =============================================================================
# Result Type
# =============================================================================


class DocumentOutcome(Enum):
    """How a generation request was resolved."""

    GENERATED = "generated"
    NOT_FOUND = "not_found"
    UNSUPPORTED_STATE = "unsupported_state"


@dataclass(frozen=True)
class DocumentResult:
    """Result of generating an application document.

    Attributes:
        outcome: How the request was resolved.
        pdf_bytes: The rendered PDF, or None for the empty outcomes.
        application_id: The requested application id.
        reference_number: The application's reference, when it was found.
    """

    outcome: DocumentOutcome
    pdf_bytes: bytes | None
    application_id: uuid.UUID
    reference_number: str | None = None

    @property
    def found(self) -> bool:
        """True if a document was produced."""
        return self.outcome is DocumentOutcome.GENERATED


# =============================================================================
# View Model Helpers
# =============================================================================


def full_name(person: Person) -> str:
    """Join first name and surname with a single space, untrimmed."""
    return person.first_name + " " + person.surname


def legal_entity_for(application: Application) -> LegalEntity | None:
    """Return the legal entity only when the application is flagged as one."""
    return application.legal_entity if application.is_legal_entity else None


def portfolio_funds(application: Application) -> tuple[Fund, ...]:
    """Flatten all funds across all products, preserving order."""
    return tuple(fund for product in application.products for fund in product.funds)


def portfolio_total_amount(funds: tuple[Fund, ...], tax_rate: Decimal) -> Decimal:
    """Sum (amount - fees) * tax_rate over the given funds."""
    return sum(
        ((fund.amount - fund.fees) * tax_rate for fund in funds),
        Decimal(0),
    )


# =============================================================================
# View Builders
# =============================================================================


class ApplicationViewBuilder(ABC):
    """Renders the document markup for one application state.

    Builders hold no state; every call constructs a fresh view model.
    """

    template_name: str

    @abstractmethod
    def build_view_model(
        self,
        application: Application,
        configuration: DocumentConfigurationLike,
    ) -> PendingApplicationViewModel:
        """Populate the view model for this state."""
        ...

    def render_view(
        self,
        application: Application,
        base_uri: str,
        *,
        template_paths: TemplatePathProvider,
        view_renderer: ViewRenderer,
        configuration: DocumentConfigurationLike,
    ) -> str:
        """Resolve the template, build the view model and render markup.

        The template path fragment is appended to base_uri as-is; callers
        supply a base URI that already ends with the right separator.
        """
        path = template_paths.get(self.template_name)
        view_model = self.build_view_model(application, configuration)
        return view_renderer.render(base_uri + path, view_model)


class PendingApplicationViewBuilder(ApplicationViewBuilder):
    """Document for applications awaiting activation."""

    template_name = "PendingApplication"

    def build_view_model(
        self,
        application: Application,
        configuration: DocumentConfigurationLike,
    ) -> PendingApplicationViewModel:
        return PendingApplicationViewModel(
            reference_number=application.reference_number,
            state=application.state.description,
            full_name=full_name(application.person),
            applied_on=application.application_date,
            support_email=configuration.support_email,
            signature=configuration.signature,
        )


class ActivatedApplicationViewBuilder(ApplicationViewBuilder):
    """Document for active applications, including the portfolio summary."""

    template_name = "ActivatedApplication"

    def build_view_model(
        self,
        application: Application,
        configuration: DocumentConfigurationLike,
    ) -> ActivatedApplicationViewModel:
        funds = portfolio_funds(application)
        return ActivatedApplicationViewModel(
            reference_number=application.reference_number,
            state=application.state.description,
            full_name=full_name(application.person),
            applied_on=application.application_date,
            support_email=configuration.support_email,
            signature=configuration.signature,
            legal_entity=legal_entity_for(application),
            portfolio_funds=funds,
            portfolio_total_amount=portfolio_total_amount(
                funds, configuration.tax_rate
            ),
        )


class InReviewApplicationViewBuilder(ApplicationViewBuilder):
    """Document for applications under review, explaining the hold."""

    template_name = "InReviewApplication"

    def build_view_model(
        self,
        application: Application,
        configuration: DocumentConfigurationLike,
    ) -> InReviewApplicationViewModel:
        """Populate the in-review view model.

        Raises:
            DataIntegrityError: If the application has no review record.
        """
        review = application.current_review
        if review is None:
            raise DataIntegrityError(
                f"Application '{application.id}' is in review "
                "but has no review record",
                application_id=application.id,
            )

        funds = portfolio_funds(application)
        return InReviewApplicationViewModel(
            reference_number=application.reference_number,
            state=application.state.description,
            full_name=full_name(application.person),
            applied_on=application.application_date,
            support_email=configuration.support_email,
            signature=configuration.signature,
            legal_entity=legal_entity_for(application),
            portfolio_funds=funds,
            portfolio_total_amount=portfolio_total_amount(
                funds, configuration.tax_rate
            ),
            in_review_message=build_in_review_message(review.reason),
            in_review_information=review,
        )


_BUILDERS: dict[ApplicationState, ApplicationViewBuilder] = {
    ApplicationState.PENDING: PendingApplicationViewBuilder(),
    ApplicationState.ACTIVATED: ActivatedApplicationViewBuilder(),
    ApplicationState.IN_REVIEW: InReviewApplicationViewBuilder(),
}


def builder_for_state(state: Any) -> ApplicationViewBuilder | None:
    """Select the view builder for an application state.

    Args:
        state: The application's state. Values outside ApplicationState
            are accepted and treated like any other unsupported state.

    Returns:
        The builder for the state, or None if the state has no document.
    """
    if not isinstance(state, ApplicationState):
        return None
    return _BUILDERS.get(state)


# =============================================================================
# Generator
# =============================================================================


class DocumentGenerator:
    """Generates PDF documents for applications.

    Collaborators are injected once at construction and never reassigned.
    """

    def __init__(
        self,
        data_provider: ApplicationDataProvider,
        template_paths: TemplatePathProvider,
        view_renderer: ViewRenderer,
        document_renderer: DocumentRenderer,
        configuration: DocumentConfigurationLike,
        header_html: str = DEFAULT_PDF_HEADER_HTML,
    ) -> None:
        self._data_provider = data_provider
        self._template_paths = template_paths
        self._view_renderer = view_renderer
        self._document_renderer = document_renderer
        self._configuration = configuration
        self._header_html = header_html

    def pdf_options(self) -> PdfOptions:
        """Fixed rendering options: numeric pages, header on first page."""
        return PdfOptions(
            page_numbers=PageNumbers.NUMERIC,
            header_options=HeaderOptions(
                header_repeat=HeaderRepeat.FIRST_PAGE_ONLY,
                header_html=self._header_html,
            ),
        )

    def generate(self, application_id: uuid.UUID, base_uri: str) -> DocumentResult:
        """Generate the PDF document for an application.

        Args:
            application_id: Identifier of the application.
            base_uri: Prefix for template paths, ending with its separator.

        Returns:
            DocumentResult with PDF bytes, or an empty NOT_FOUND /
            UNSUPPORTED_STATE result.

        Raises:
            DataIntegrityError: If the application data is inconsistent.
            ProviderError: If a collaborator fails.
        """
        application = self._data_provider.find_application(application_id)
        if application is None:
            logger.warning("No application found for id '%s'", application_id)
            return DocumentResult(
                outcome=DocumentOutcome.NOT_FOUND,
                pdf_bytes=None,
                application_id=application_id,
            )

        builder = builder_for_state(application.state)
        if builder is None:
            logger.warning(
                "No valid document can be generated for application '%s' "
                "in state '%s'",
                application.id,
                _state_label(application.state),
            )
            return DocumentResult(
                outcome=DocumentOutcome.UNSUPPORTED_STATE,
                pdf_bytes=None,
                application_id=application_id,
                reference_number=application.reference_number,
            )

        markup = builder.render_view(
            application,
            base_uri,
            template_paths=self._template_paths,
            view_renderer=self._view_renderer,
            configuration=self._configuration,
        )
        pdf_bytes = self._document_renderer.render_pdf(markup, self.pdf_options())

        return DocumentResult(
            outcome=DocumentOutcome.GENERATED,
            pdf_bytes=pdf_bytes,
            application_id=application_id,
            reference_number=application.reference_number,
        )


def _state_label(state: Any) -> str:
    if isinstance(state, ApplicationState):
        return state.value
    return str(state)
