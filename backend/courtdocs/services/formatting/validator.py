from typing import List, Optional
import logging

from courtdocs.services.formatting.metrics import DEFAULT_WORDS_PER_PAGE, estimated_pages, word_count
from courtdocs.services.formatting.models import (
    ComplianceResult, ComplianceViolation, ComplianceWarning,
    DocumentCategory, RuleProfile, Severity
)

logger = logging.getLogger(__name__)

TOC_MARKER = "TABLE OF CONTENTS"
TOA_MARKER = "TABLE OF AUTHORITIES"
SERVICE_MARKERS = ("CERTIFICATE OF SERVICE", "PROOF OF SERVICE", "AFFIDAVIT OF SERVICE")
SIGNATURE_PHRASES = ("Respectfully submitted", "respectfully submitted")


class ComplianceValidator:
    """
    Validates an assembled filing against a court's formatting rules.
    Every check runs independently; failures are reported, never raised.
    """

    @staticmethod
    def validate(
        content: str,
        rules: RuleProfile,
        document_type: Optional[DocumentCategory] = None,
        words_per_page: int = DEFAULT_WORDS_PER_PAGE,
    ) -> ComplianceResult:
        effective = rules.for_document(document_type)
        violations: List[ComplianceViolation] = []
        warnings: List[ComplianceWarning] = []

        # 1. Length limits
        _check_length(content, effective, words_per_page, violations)

        # 2. Required components
        _check_required_sections(content, effective, violations)

        # 3. Formatting hygiene (warnings only)
        _check_formatting(content, warnings)

        result = ComplianceResult(
            is_compliant=not any(v.severity == Severity.ERROR for v in violations),
            violations=violations,
            warnings=warnings,
        )
        logger.debug(
            f"Compliance for '{effective.id}': "
            f"compliant={result.is_compliant}, violations={len(violations)}, warnings={len(warnings)}"
        )
        return result


def _check_length(content: str, rules: RuleProfile, words_per_page: int, violations: List[ComplianceViolation]):
    """Word limit (error) and page cap (warning severity)"""
    count = word_count(content)
    word_rules = rules.word_count
    limit_active = bool(word_rules and word_rules.has_limit)

    if limit_active and word_rules.max_words and count > word_rules.max_words:
        excess = count - word_rules.max_words
        violations.append(ComplianceViolation(
            rule="Word Count",
            description=f"Document exceeds word limit of {word_rules.max_words} words (current: {count})",
            severity=Severity.ERROR,
            suggestion=f"Reduce content by {excess} words",
        ))

    # The word-count page cap takes precedence; otherwise fall back to the page rules
    max_pages = word_rules.max_pages if limit_active and word_rules.max_pages else rules.page.max_pages
    if max_pages:
        pages = estimated_pages(count, words_per_page)
        if pages > max_pages:
            violations.append(ComplianceViolation(
                rule="Page Limit",
                description=f"Document may exceed page limit of {max_pages} pages (estimated: {pages})",
                severity=Severity.WARNING,
                suggestion="Review document length",
            ))


def _check_required_sections(content: str, rules: RuleProfile, violations: List[ComplianceViolation]):
    """TOC, TOA and certificate of service presence"""
    if rules.table_of_contents and rules.table_of_contents.required and TOC_MARKER not in content:
        violations.append(ComplianceViolation(
            rule="Table of Contents",
            description="Table of Contents is required but not found",
            severity=Severity.ERROR,
            suggestion="Add a Table of Contents",
        ))

    if rules.table_of_authorities and rules.table_of_authorities.required and TOA_MARKER not in content:
        violations.append(ComplianceViolation(
            rule="Table of Authorities",
            description="Table of Authorities is required but not found",
            severity=Severity.ERROR,
            suggestion="Add a Table of Authorities",
        ))

    if rules.certificate_of_service.required and not any(m in content for m in SERVICE_MARKERS):
        violations.append(ComplianceViolation(
            rule="Certificate of Service",
            description="Certificate/Proof of Service is required but not found",
            severity=Severity.ERROR,
            suggestion="Add a Certificate of Service",
        ))


def _check_formatting(content: str, warnings: List[ComplianceWarning]):
    if "  " in content:
        warnings.append(ComplianceWarning(
            rule="Formatting",
            description="Document contains double spaces",
            suggestion="Replace double spaces with single spaces",
        ))

    if not any(phrase in content for phrase in SIGNATURE_PHRASES):
        warnings.append(ComplianceWarning(
            rule="Signature Block",
            description="No signature block detected",
            suggestion="Add a proper signature block",
        ))


def validate_compliance(
    content: str,
    rules: RuleProfile,
    document_type: Optional[DocumentCategory] = None,
    words_per_page: int = DEFAULT_WORDS_PER_PAGE,
) -> ComplianceResult:
    return ComplianceValidator.validate(content, rules, document_type, words_per_page)
