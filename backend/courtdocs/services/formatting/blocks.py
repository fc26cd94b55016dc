"""
Block generators for the non-caption parts of a filing:
signature block, certificate of service, table of contents and table of authorities.
"""
import re
from datetime import date
from typing import Dict, List, Optional

from courtdocs.services.formatting.models import (
    AttorneyInfo, CertificateFormat, Citation, Heading, RuleProfile,
    ServiceInfo, ServiceMethod, TocFormat
)
from courtdocs.services.formatting.templates import (
    AFFIDAVIT_CLOSING, AFFIDAVIT_OPENING, CERTIFICATE_OPENING,
    DECLARATION_CLOSING, DECLARATION_OPENING, WORD_COUNT_DECLARATION_TEMPLATE
)

SIGNATURE_PLACEHOLDER = '<div class="signature-placeholder">_______________________________</div>'

CERTIFICATE_TITLES: Dict[CertificateFormat, str] = {
    CertificateFormat.DECLARATION: "PROOF OF SERVICE",
    CertificateFormat.CERTIFICATE: "CERTIFICATE OF SERVICE",
    CertificateFormat.AFFIDAVIT: "AFFIDAVIT OF SERVICE",
}

SERVICE_METHOD_TEXT: Dict[ServiceMethod, str] = {
    ServiceMethod.ECF: "the Court's CM/ECF electronic filing system",
    ServiceMethod.EMAIL: "electronic mail",
    ServiceMethod.MAIL: "United States mail, first-class postage prepaid",
    ServiceMethod.PERSONAL: "personal service",
    ServiceMethod.OVERNIGHT: "overnight delivery service",
    ServiceMethod.FAX: "facsimile transmission",
}

TOC_LEADERS: Dict[TocFormat, str] = {
    TocFormat.DOTTED: '<span class="toc-dots"></span>',
    TocFormat.LINED: '<span class="toc-rule"></span>',
    TocFormat.PLAIN: "",
}

HEADING_PATTERN = re.compile(r"<h([1-4])[^>]*>([^<]+)</h[1-4]>", re.IGNORECASE)


def format_long_date(value: date) -> str:
    """'January 5, 2025'"""
    return f"{value:%B} {value.day}, {value.year}"


def _signature_line(name: str) -> List[str]:
    return [
        '<div class="signature-line">',
        SIGNATURE_PLACEHOLDER,
        f'<div class="signature-name">{name}</div>',
        "</div>",
    ]


def generate_signature_block(attorney: AttorneyInfo, rules: RuleProfile) -> str:
    sig_rules = rules.signature
    lines: List[str] = ['<div class="signature-block">']

    lines.append('<div class="signature-intro">Respectfully submitted,</div>')
    lines.extend(_signature_line(attorney.name))

    lines.append('<div class="attorney-info">')
    if sig_rules.include_bar_number:
        lines.append(f"<div>{attorney.bar_state} Bar No. {attorney.bar_number}</div>")
    if sig_rules.include_firm_name and attorney.firm_name:
        lines.append(f'<div class="firm-name">{attorney.firm_name}</div>')
    if sig_rules.include_address:
        lines.extend(f"<div>{line}</div>" for line in attorney.address)
    if sig_rules.include_phone:
        lines.append(f"<div>Telephone: {attorney.phone}</div>")
    if sig_rules.include_fax and attorney.fax:
        lines.append(f"<div>Facsimile: {attorney.fax}</div>")
    if sig_rules.include_email:
        lines.append(f"<div>Email: {attorney.email}</div>")
    lines.append(f'<div class="representing">Attorney for {attorney.representing_party}</div>')
    lines.append("</div>")

    lines.append("</div>")
    return "\n".join(lines)


def _service_item(index: int, service: ServiceInfo) -> List[str]:
    lines = ['<div class="service-item">', f"<p><strong>{index}. {service.recipient_name}</strong></p>"]
    if service.recipient_address:
        lines.append(f'<p class="address">{service.recipient_address}</p>')
    lines.append(f'<p class="method">via {SERVICE_METHOD_TEXT[service.method]}</p>')
    if service.method == ServiceMethod.EMAIL and service.recipient_email:
        lines.append(f'<p class="email">{service.recipient_email}</p>')
    lines.append("</div>")
    return lines


def generate_certificate_of_service(
    services: List[ServiceInfo],
    declarant_name: str,
    rules: RuleProfile,
    service_date: Optional[date] = None,
) -> str:
    """
    Certificate, proof (declaration) or affidavit of service, per the court's format.
    Dated statements use service_date, defaulting to today.
    """
    cert_format = rules.certificate_of_service.format
    when = format_long_date(service_date or date.today())
    lines: List[str] = ['<div class="certificate-of-service">']
    lines.append(f'<div class="cert-title">{CERTIFICATE_TITLES[cert_format]}</div>')

    lines.append('<div class="cert-opening">')
    if cert_format == CertificateFormat.DECLARATION:
        lines.append(DECLARATION_OPENING.substitute(declarant=declarant_name))
    elif cert_format == CertificateFormat.AFFIDAVIT:
        lines.append(AFFIDAVIT_OPENING.substitute(declarant=declarant_name))
    else:
        lines.append(CERTIFICATE_OPENING.substitute(date=when))
    lines.append("</div>")

    lines.append('<div class="service-details">')
    for index, service in enumerate(services, start=1):
        lines.extend(_service_item(index, service))
    lines.append("</div>")

    lines.append('<div class="cert-closing">')
    if cert_format == CertificateFormat.DECLARATION:
        lines.append(DECLARATION_CLOSING.substitute(date=when))
        lines.extend(_signature_line(declarant_name))
    elif cert_format == CertificateFormat.AFFIDAVIT:
        lines.extend(_signature_line(declarant_name))
        lines.append(AFFIDAVIT_CLOSING.substitute())
    else:
        lines.extend(_signature_line(declarant_name))
    lines.append("</div>")

    lines.append("</div>")
    return "\n".join(lines)


def generate_table_of_contents(headings: List[Heading], rules: RuleProfile) -> str:
    toc_rules = rules.table_of_contents
    if not toc_rules or not toc_rules.required:
        return ""

    leader = TOC_LEADERS[toc_rules.format]
    lines: List[str] = ['<div class="table-of-contents">', '<div class="toc-title">TABLE OF CONTENTS</div>']
    lines.append('<div class="toc-entries">')
    for heading in headings:
        indent = f"margin-left: {(heading.level - 1) * 20}px;" if heading.level > 1 else ""
        lines.append(f'<div class="toc-entry level-{heading.level}" style="{indent}">')
        lines.append(f'<span class="toc-text">{heading.text}</span>')
        if leader:
            lines.append(leader)
        if toc_rules.include_page_numbers:
            lines.append(f'<span class="toc-page">{heading.page}</span>')
        lines.append("</div>")
    lines.append("</div>")
    lines.append("</div>")
    return "\n".join(lines)


def _authority_entry(citation: Citation) -> List[str]:
    pages = ", ".join(str(page) for page in citation.pages)
    return [
        '<div class="toa-entry">',
        f'<span class="toa-citation">{citation.text}</span>',
        '<span class="toa-dots"></span>',
        f'<span class="toa-pages">{pages}</span>',
        "</div>",
    ]


def generate_table_of_authorities(citations: List[Citation], rules: RuleProfile) -> str:
    toa_rules = rules.table_of_authorities
    if not toa_rules or not toa_rules.required:
        return ""

    lines: List[str] = ['<div class="table-of-authorities">', '<div class="toa-title">TABLE OF AUTHORITIES</div>']
    if toa_rules.categorize:
        by_category: Dict[str, List[Citation]] = {}
        for citation in citations:
            by_category.setdefault(citation.category, []).append(citation)

        # Categories missing from the court's ordering are not listed
        for category in toa_rules.categories:
            entries = by_category.get(category)
            if not entries:
                continue
            lines.append('<div class="toa-category">')
            lines.append(f'<div class="toa-category-title">{category}</div>')
            for citation in entries:
                lines.extend(_authority_entry(citation))
            lines.append("</div>")
    else:
        for citation in citations:
            lines.extend(_authority_entry(citation))

    lines.append("</div>")
    return "\n".join(lines)


def generate_word_count_declaration(count: int, rules: RuleProfile) -> str:
    word_rules = rules.word_count
    if not word_rules or not word_rules.require_declaration:
        return ""
    limit = f" (limit: {word_rules.max_words:,})" if word_rules.max_words else ""
    return WORD_COUNT_DECLARATION_TEMPLATE.substitute(
        citation=rules.local_rules_citation or "applicable rules",
        count=f"{count:,}",
        limit=limit,
    )


def extract_headings(html: str) -> List[Heading]:
    """
    Collect <h1>-<h4> headings in document order for the table of contents.
    Pagination is not simulated, so every heading is placed on page 1.
    """
    return [
        Heading(level=int(match.group(1)), text=match.group(2).strip(), page=1)
        for match in HEADING_PATTERN.finditer(html)
    ]
