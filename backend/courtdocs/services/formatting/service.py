import html
import logging
from datetime import date
from typing import List, Optional

from courtdocs.core.config import settings
from courtdocs.services.formatting.blocks import (
    generate_certificate_of_service, generate_signature_block,
    generate_table_of_authorities, generate_table_of_contents,
    generate_word_count_declaration
)
from courtdocs.services.formatting.captions import generate_caption_for_jurisdiction
from courtdocs.services.formatting.metrics import estimated_pages, word_count
from courtdocs.services.formatting.models import (
    AttorneyInfo, CaptionData, Citation, DocumentCategory, FormattedDocument,
    Heading, RuleProfile, ServiceInfo
)
from courtdocs.services.formatting.styles import generate_caption_styles, generate_document_styles
from courtdocs.services.formatting.templates import HTML_DOCUMENT_TEMPLATE
from courtdocs.services.formatting.validator import ComplianceValidator

logger = logging.getLogger(__name__)


def _join(fragments: List[Optional[str]]) -> str:
    return "\n".join(fragment for fragment in fragments if fragment)


class FormattingService:
    def __init__(self, words_per_page: Optional[int] = None):
        self.words_per_page = settings.WORDS_PER_PAGE if words_per_page is None else words_per_page
        if self.words_per_page <= 0:
            raise ValueError(f"words_per_page must be positive, got {self.words_per_page}")
        logger.info(f"FormattingService initialized ({self.words_per_page} words/page)")

    def format_document(
        self,
        body: str,
        caption_data: CaptionData,
        attorney: AttorneyInfo,
        services: List[ServiceInfo],
        rules: RuleProfile,
        headings: Optional[List[Heading]] = None,
        citations: Optional[List[Citation]] = None,
        document_type: Optional[DocumentCategory] = None,
        service_date: Optional[date] = None,
    ) -> FormattedDocument:
        """
        Assemble a filing for one court.

        Flow:
        1. Caption (jurisdiction template) and signature block
        2. Certificate of service if the court requires one
        3. TOC / TOA when headings / citations are supplied
        4. Word and page counts from the body alone
        5. Compliance check over the assembled content
        """
        caption = generate_caption_for_jurisdiction(caption_data, rules)
        signature = generate_signature_block(attorney, rules)
        certificate = (
            generate_certificate_of_service(services, attorney.name, rules, service_date)
            if rules.certificate_of_service.required
            else None
        )
        toc = generate_table_of_contents(headings, rules) if headings is not None else None
        toa = generate_table_of_authorities(citations, rules) if citations is not None else None

        # Caption, TOC, TOA, signature and certificate are never counted
        count = word_count(body)
        pages = estimated_pages(count, self.words_per_page)
        declaration = generate_word_count_declaration(count, rules) or None

        full_content = _join([toc, toa, caption, body, signature, certificate])
        compliance = ComplianceValidator.validate(full_content, rules, document_type, self.words_per_page)

        logger.info(
            f"Formatted document for court '{rules.id}': {count} words, ~{pages} pages, "
            f"compliant={compliance.is_compliant}"
        )
        return FormattedDocument(
            caption=caption,
            table_of_contents=toc,
            table_of_authorities=toa,
            body=body,
            signature=signature,
            certificate_of_service=certificate,
            word_count_declaration=declaration,
            word_count=count,
            page_count=pages,
            compliance=compliance,
        )

    def export_full_document(self, formatted: FormattedDocument, rules: RuleProfile, title: str) -> str:
        """Standalone HTML document with the court's styles embedded."""
        styles = generate_document_styles(rules) + generate_caption_styles()
        sections = _join([
            formatted.table_of_contents,
            formatted.table_of_authorities,
            formatted.caption,
            formatted.body,
            formatted.signature,
            formatted.certificate_of_service,
            formatted.word_count_declaration,
        ])
        return HTML_DOCUMENT_TEMPLATE.substitute(
            title=html.escape(title),
            styles=styles,
            sections=sections,
        )


formatting_service = FormattingService()


def format_document(
    body: str,
    caption_data: CaptionData,
    attorney: AttorneyInfo,
    services: List[ServiceInfo],
    rules: RuleProfile,
    headings: Optional[List[Heading]] = None,
    citations: Optional[List[Citation]] = None,
    document_type: Optional[DocumentCategory] = None,
    service_date: Optional[date] = None,
) -> FormattedDocument:
    return formatting_service.format_document(
        body, caption_data, attorney, services, rules, headings, citations, document_type, service_date
    )


def export_full_document(formatted: FormattedDocument, rules: RuleProfile, title: str) -> str:
    return formatting_service.export_full_document(formatted, rules, title)
