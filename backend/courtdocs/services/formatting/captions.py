"""
Caption Templates
Jurisdiction-specific caption layouts and the dispatcher that picks one for a rule profile.

Templates are tried in registration order and the first one whose jurisdiction
list overlaps the profile's jurisdiction (substring match in either direction,
case-insensitive) wins. Overlapping templates are therefore resolved by order:
'California' matches the Superior Court layout before the Court of Appeal one.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, NamedTuple

from courtdocs.services.formatting.models import (
    CaptionData, CaptionRequirements, Party, PartyFormat, RuleProfile
)

logger = logging.getLogger(__name__)

PARTY_SEPARATORS = {
    PartyFormat.V: "v.",
    PartyFormat.VS: "vs.",
    PartyFormat.VERSUS: "versus",
}

ET_AL = "et al.,"


# --- Shared formatting primitives ---

def format_party_name(name: str, all_caps: bool) -> str:
    return name.upper() if all_caps else name


def party_separator(party_format: PartyFormat) -> str:
    return PARTY_SEPARATORS[PartyFormat(party_format)]


def capitalize_role(role: str) -> str:
    return role[:1].upper() + role[1:]


def role_label(parties: List[Party], default_role: str) -> str:
    """'Plaintiff' / 'Plaintiffs' from the first party's role; plural iff more than one party."""
    role = parties[0].role.value if parties else default_role
    return f"{capitalize_role(role)}{'s' if len(parties) > 1 else ''}"


class PartySide(NamedTuple):
    names: List[str]
    et_al: bool
    role: str


def _side(parties: List[Party], caption_rules: CaptionRequirements, default_role: str) -> PartySide:
    lead = [format_party_name(p.name, caption_rules.all_caps) for p in parties if p.is_lead_party]
    return PartySide(
        names=lead,
        et_al=len(parties) > len(lead),
        role=role_label(parties, default_role),
    )


def _name_lines(side: PartySide, css_class: str, comma_after_last: bool = False) -> List[str]:
    """Lead names, comma-separated; the last name takes a comma only before 'et al.' unless asked."""
    lines = []
    for index, name in enumerate(side.names):
        followed = index < len(side.names) - 1 or side.et_al or comma_after_last
        lines.append(f'<div class="{css_class}">{name}{"," if followed else ""}</div>')
    if side.et_al:
        lines.append(f'<div class="{css_class} party-etal">{ET_AL}</div>')
    return lines


def _hearing_lines(data: CaptionData, caption_rules: CaptionRequirements, location_label: str = "Location") -> List[str]:
    if not (caption_rules.include_hearing_info and data.hearing_date):
        return []
    lines = ['<div class="hearing-info">', f"<div>Date: {data.hearing_date}</div>"]
    if data.hearing_time:
        lines.append(f"<div>Time: {data.hearing_time}</div>")
    if data.hearing_location:
        lines.append(f"<div>{location_label}: {data.hearing_location}</div>")
    lines.append("</div>")
    return lines


def _title_line(data: CaptionData) -> str:
    return f'<div class="document-title">{data.document_title.upper()}</div>'


def _wrap(layout: str, lines: List[str]) -> str:
    body = "\n".join(lines)
    return f'<div class="caption {layout}">\n{body}\n</div>'


# --- Federal ---

def generate_federal_district_caption(data: CaptionData, rules: RuleProfile) -> str:
    """Two-column caption box: parties on the left, case information on the right."""
    caption_rules = rules.caption
    plaintiffs = _side(data.plaintiffs, caption_rules, "plaintiff")
    defendants = _side(data.defendants, caption_rules, "defendant")
    lines: List[str] = []

    lines.append('<div class="caption-header">')
    if caption_rules.include_court_name:
        lines.append(f'<div class="court-name">{data.court_name.upper()}</div>')
    if data.court_division:
        lines.append(f'<div class="court-division">{data.court_division.upper()}</div>')
    lines.append("</div>")

    lines.append('<div class="caption-box">')
    lines.append('<div class="caption-parties">')
    lines.extend(_name_lines(plaintiffs, "party-name"))
    lines.append(f'<div class="party-role">{plaintiffs.role},</div>')
    lines.append(f'<div class="party-vs">{party_separator(caption_rules.party_format)}</div>')
    lines.extend(_name_lines(defendants, "party-name"))
    lines.append(f'<div class="party-role">{defendants.role}.</div>')
    lines.append("</div>")

    lines.append('<div class="caption-info">')
    if caption_rules.include_case_number:
        lines.append(f'<div class="case-number">Case No. {data.case_number}</div>')
    if caption_rules.include_department and data.department:
        lines.append(f'<div class="department">Department {data.department}</div>')
    if caption_rules.include_judge_name and data.judge_name:
        lines.append(f'<div class="judge-assigned">Hon. {data.judge_name}</div>')
    lines.append(_title_line(data))
    lines.extend(_hearing_lines(data, caption_rules))
    lines.append("</div>")
    lines.append("</div>")

    return _wrap("federal-district", lines)


def generate_federal_appellate_caption(data: CaptionData, rules: RuleProfile) -> str:
    """Centered appellate caption with the docket number above the parties."""
    caption_rules = rules.caption
    appellants = _side(data.plaintiffs, caption_rules, "appellant")
    appellees = _side(data.defendants, caption_rules, "appellee")
    lines: List[str] = []

    if caption_rules.include_court_name:
        lines.append('<div class="caption-header centered">')
        lines.append(f'<div class="court-name">{data.court_name.upper()}</div>')
        lines.append("</div>")
    if caption_rules.include_case_number:
        lines.append(f'<div class="case-number-line centered">No. {data.case_number}</div>')

    lines.append('<div class="caption-parties-block">')
    lines.extend(_name_lines(appellants, "party-line"))
    lines.append(f'<div class="party-role-line">{appellants.role},</div>')
    lines.append(f'<div class="vs-line centered">{party_separator(caption_rules.party_format)}</div>')
    lines.extend(_name_lines(appellees, "party-line"))
    lines.append(f'<div class="party-role-line">{appellees.role}.</div>')
    lines.append("</div>")

    if caption_rules.include_judge_name and data.judge_name:
        lines.append(f'<div class="lower-court-judge centered">Hon. {data.judge_name}</div>')
    if caption_rules.include_department and data.department:
        lines.append(f'<div class="department centered">{data.department}</div>')

    lines.append('<div class="document-title-section centered">')
    lines.append(_title_line(data))
    lines.append("</div>")
    lines.extend(_hearing_lines(data, caption_rules))

    return _wrap("federal-appellate", lines)


# --- California ---

def generate_california_superior_caption(data: CaptionData, rules: RuleProfile) -> str:
    """Bordered two-cell caption table used on pleading paper."""
    caption_rules = rules.caption
    plaintiffs = _side(data.plaintiffs, caption_rules, "plaintiff")
    defendants = _side(data.defendants, caption_rules, "defendant")
    lines: List[str] = []

    lines.append('<div class="attorney-header"></div>')
    lines.append('<div class="caption-header">')
    if caption_rules.include_court_name:
        lines.append(f'<div class="court-name">{data.court_name.upper()}</div>')
    if data.court_division:
        lines.append(f'<div class="court-division">COUNTY OF {data.court_division.upper()}</div>')
    lines.append("</div>")

    lines.append('<table class="caption-table" border="1" cellpadding="10">')
    lines.append("<tr>")
    lines.append('<td class="parties-cell" width="50%">')
    lines.extend(_name_lines(plaintiffs, "party-name"))
    lines.append(f'<div class="party-role">{plaintiffs.role},</div>')
    lines.append(f'<div class="party-vs">{party_separator(caption_rules.party_format)}</div>')
    lines.extend(_name_lines(defendants, "party-name"))
    lines.append(f'<div class="party-role">{defendants.role}.</div>')
    lines.append("</td>")

    lines.append('<td class="info-cell" valign="top">')
    if caption_rules.include_case_number:
        lines.append(f'<div class="case-number">Case No. {data.case_number}</div>')
    if caption_rules.include_department and data.department:
        lines.append(f'<div class="department">Dept. {data.department}</div>')
    if caption_rules.include_judge_name and data.judge_name:
        lines.append(f'<div class="judge">Assigned to Hon. {data.judge_name}</div>')
    lines.append(_title_line(data))
    lines.extend(_hearing_lines(data, caption_rules, location_label="Dept"))
    lines.append("</td>")
    lines.append("</tr>")
    lines.append("</table>")

    return _wrap("california-superior", lines)


def generate_california_appellate_caption(data: CaptionData, rules: RuleProfile) -> str:
    caption_rules = rules.caption
    appellants = _side(data.plaintiffs, caption_rules, "appellant")
    respondents = _side(data.defendants, caption_rules, "respondent")
    lines: List[str] = []

    if caption_rules.include_court_name:
        lines.append('<div class="caption-header centered">')
        lines.append('<div class="court-name">IN THE COURT OF APPEAL OF THE STATE OF CALIFORNIA</div>')
        if data.court_division:
            lines.append(f'<div class="court-division">{data.court_division.upper()} APPELLATE DISTRICT</div>')
        lines.append("</div>")
    if caption_rules.include_case_number:
        lines.append(f'<div class="case-number-block centered">{data.case_number}</div>')
    if caption_rules.include_department and data.department:
        lines.append(f'<div class="department centered">Division {data.department}</div>')

    lines.append('<div class="parties-block centered">')
    lines.extend(_name_lines(appellants, "party-line"))
    lines.append(f'<div class="role-line">{appellants.role},</div>')
    lines.append(f'<div class="vs-line">{party_separator(caption_rules.party_format)}</div>')
    lines.extend(_name_lines(respondents, "party-line"))
    lines.append(f'<div class="role-line">{respondents.role}.</div>')
    lines.append("</div>")

    lines.append('<div class="document-title-block centered">')
    lines.append(_title_line(data))
    lines.append("</div>")

    lines.append('<div class="appeal-notice centered">')
    lines.append(f'<div class="appeal-from">On Appeal from the Superior Court of {data.court_division or "____________"} County</div>')
    if caption_rules.include_judge_name and data.judge_name:
        lines.append(f'<div class="lower-court-judge">Hon. {data.judge_name}, Judge</div>')
    lines.append("</div>")
    lines.extend(_hearing_lines(data, caption_rules))

    return _wrap("california-appellate", lines)


# --- New York ---

NY_RULE = '<div class="caption-separator">-------------------------------------------------------x</div>'


def generate_new_york_supreme_caption(data: CaptionData, rules: RuleProfile) -> str:
    """Venue header followed by the dashed 'x' box with the index number beside the separator."""
    caption_rules = rules.caption
    plaintiffs = _side(data.plaintiffs, caption_rules, "plaintiff")
    defendants = _side(data.defendants, caption_rules, "defendant")
    lines: List[str] = []

    lines.append('<div class="venue-header">')
    if caption_rules.include_court_name:
        lines.append(f'<div class="state-line">{data.court_name.upper()}</div>')
    if data.court_division:
        lines.append(f'<div class="county-line">COUNTY OF {data.court_division.upper()}</div>')
    lines.append("</div>")

    lines.append(NY_RULE)
    lines.append('<div class="parties-section">')
    lines.extend(_name_lines(plaintiffs, "party-line"))
    lines.append(f'<div class="role-line">{plaintiffs.role},</div>')
    lines.append('<div class="vs-section">')
    lines.append(f'<span class="vs-text">{party_separator(caption_rules.party_format)}</span>')
    if caption_rules.include_case_number:
        lines.append(f'<span class="index-number">Index No. {data.case_number}</span>')
    lines.append("</div>")
    lines.extend(_name_lines(defendants, "party-line"))
    lines.append(f'<div class="role-line">{defendants.role}.</div>')
    lines.append("</div>")
    lines.append(NY_RULE)

    if caption_rules.include_judge_name and data.judge_name:
        lines.append(f'<div class="judge">Hon. {data.judge_name}, J.S.C.</div>')
    if caption_rules.include_department and data.department:
        lines.append(f'<div class="department">Part {data.department}</div>')

    lines.append('<div class="document-title-block centered">')
    lines.append(_title_line(data))
    lines.append("</div>")
    lines.extend(_hearing_lines(data, caption_rules))

    return _wrap("new-york-supreme", lines)


# --- Texas ---

def generate_texas_caption(data: CaptionData, rules: RuleProfile) -> str:
    """Cause number header and the section-symbol column between parties and court."""
    caption_rules = rules.caption
    plaintiffs = _side(data.plaintiffs, caption_rules, "plaintiff")
    defendants = _side(data.defendants, caption_rules, "defendant")
    lines: List[str] = []

    if caption_rules.include_case_number:
        lines.append('<div class="cause-number-header">')
        lines.append(f'<div class="cause-number">CAUSE NO. {data.case_number}</div>')
        lines.append("</div>")

    lines.append('<table class="caption-table" width="100%">')
    lines.append("<tr>")
    lines.append('<td width="45%">')
    lines.extend(_name_lines(plaintiffs, "party-name", comma_after_last=True))
    lines.append(f'<div class="party-role">{plaintiffs.role}</div>')
    lines.append(f'<div class="party-vs">{party_separator(caption_rules.party_format).upper()}</div>')
    lines.extend(_name_lines(defendants, "party-name", comma_after_last=True))
    lines.append(f'<div class="party-role">{defendants.role}</div>')
    lines.append("</td>")

    lines.append('<td width="10%" class="section-column">')
    lines.extend(["<div>&sect;</div>"] * 5)
    lines.append("</td>")

    lines.append('<td width="45%">')
    if caption_rules.include_court_name:
        lines.append(f"<div>IN THE {data.court_name.upper()}</div>")
    if caption_rules.include_department and data.department:
        lines.append(f"<div>{data.department.upper()} JUDICIAL DISTRICT</div>")
    lines.append(f"<div>{(data.court_division or '____________').upper()} COUNTY, TEXAS</div>")
    if caption_rules.include_judge_name and data.judge_name:
        lines.append(f"<div>Hon. {data.judge_name}</div>")
    lines.append("</td>")
    lines.append("</tr>")
    lines.append("</table>")

    lines.append('<div class="document-title-block centered">')
    lines.append(_title_line(data))
    lines.append("</div>")
    lines.extend(_hearing_lines(data, caption_rules))

    return _wrap("texas", lines)


# --- Registry ---

CaptionGenerator = Callable[[CaptionData, RuleProfile], str]


@dataclass(frozen=True)
class CaptionTemplate:
    id: str
    name: str
    jurisdictions: Tuple[str, ...]
    generate: CaptionGenerator

    def matches(self, jurisdiction: str) -> bool:
        target = jurisdiction.lower()
        return any(j.lower() in target or target in j.lower() for j in self.jurisdictions)


CAPTION_TEMPLATES: List[CaptionTemplate] = [
    CaptionTemplate(
        id="federal-district",
        name="Federal District Court",
        jurisdictions=("Federal", "N.D. Cal.", "S.D.N.Y.", "C.D. Cal.", "D. Del."),
        generate=generate_federal_district_caption,
    ),
    CaptionTemplate(
        id="federal-appellate",
        name="Federal Court of Appeals",
        jurisdictions=("9th Circuit", "Federal"),
        generate=generate_federal_appellate_caption,
    ),
    CaptionTemplate(
        id="california-superior",
        name="California Superior Court",
        jurisdictions=("California - Los Angeles", "California"),
        generate=generate_california_superior_caption,
    ),
    CaptionTemplate(
        id="california-appellate",
        name="California Court of Appeal",
        jurisdictions=("California",),
        generate=generate_california_appellate_caption,
    ),
    CaptionTemplate(
        id="new-york-supreme",
        name="New York Supreme Court",
        jurisdictions=("New York",),
        generate=generate_new_york_supreme_caption,
    ),
    CaptionTemplate(
        id="texas",
        name="Texas State Courts",
        jurisdictions=("Texas",),
        generate=generate_texas_caption,
    ),
]


def get_caption_template(jurisdiction: str) -> Optional[CaptionTemplate]:
    """First registered template overlapping the jurisdiction, or None."""
    return next((t for t in CAPTION_TEMPLATES if t.matches(jurisdiction)), None)


def generate_caption_for_jurisdiction(data: CaptionData, rules: RuleProfile) -> str:
    template = get_caption_template(rules.jurisdiction)
    if template is None:
        logger.debug(f"No caption template for jurisdiction '{rules.jurisdiction}', using federal district layout")
        return generate_federal_district_caption(data, rules)
    logger.debug(f"Caption template '{template.id}' selected for jurisdiction '{rules.jurisdiction}'")
    return template.generate(data, rules)
