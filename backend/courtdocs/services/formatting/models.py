"""
Pydantic models for court formatting rules, document inputs and compliance results
"""
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, model_validator
from enum import Enum


class CourtLevel(str, Enum):
    SUPREME = "supreme"
    APPELLATE = "appellate"
    DISTRICT = "district"
    BANKRUPTCY = "bankruptcy"
    MAGISTRATE = "magistrate"
    STATE_SUPREME = "state_supreme"
    STATE_APPELLATE = "state_appellate"
    STATE_TRIAL = "state_trial"


FEDERAL_LEVELS = (
    CourtLevel.SUPREME,
    CourtLevel.APPELLATE,
    CourtLevel.DISTRICT,
    CourtLevel.BANKRUPTCY,
    CourtLevel.MAGISTRATE,
)


class DocumentCategory(str, Enum):
    MOTION = "motion"
    BRIEF = "brief"
    COMPLAINT = "complaint"
    ANSWER = "answer"
    MEMORANDUM = "memorandum"
    DECLARATION = "declaration"
    AFFIDAVIT = "affidavit"
    NOTICE = "notice"
    ORDER = "order"
    JUDGMENT = "judgment"


class PageSize(str, Enum):
    LETTER = "letter"
    LEGAL = "legal"
    A4 = "a4"


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class PageNumbering(str, Enum):
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"
    TOP_RIGHT = "top-right"
    NONE = "none"


class CaptionFormat(str, Enum):
    FEDERAL = "federal"
    STATE = "state"
    CUSTOM = "custom"


class PartyFormat(str, Enum):
    V = "v"
    VS = "vs"
    VERSUS = "versus"


class SignatureFormat(str, Enum):
    BLOCK = "block"
    CENTERED = "centered"
    RIGHT_ALIGNED = "right-aligned"


class TocFormat(str, Enum):
    DOTTED = "dotted"
    PLAIN = "plain"
    LINED = "lined"


class ToaFormat(str, Enum):
    BLUEBOOK = "bluebook"
    ALWD = "alwd"
    COURT_SPECIFIC = "court-specific"


class CertificateFormat(str, Enum):
    DECLARATION = "declaration"
    CERTIFICATE = "certificate"
    AFFIDAVIT = "affidavit"


class ServiceMethod(str, Enum):
    ECF = "ecf"
    EMAIL = "email"
    MAIL = "mail"
    PERSONAL = "personal"
    OVERNIGHT = "overnight"
    FAX = "fax"


class PartyRole(str, Enum):
    PLAINTIFF = "plaintiff"
    DEFENDANT = "defendant"
    PETITIONER = "petitioner"
    RESPONDENT = "respondent"
    APPELLANT = "appellant"
    APPELLEE = "appellee"
    CROSS_APPELLANT = "cross-appellant"
    CROSS_APPELLEE = "cross-appellee"
    INTERVENOR = "intervenor"
    THIRD_PARTY = "third-party"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


# --- RULE PROFILE ---

class _RuleRecord(BaseModel):
    model_config = ConfigDict(frozen=True)


class FontRequirements(_RuleRecord):
    family: List[str] = Field(..., description="Allowed font families, in order of preference")
    size_body: float = Field(..., description="Body text size in points")
    size_footnotes: float = Field(..., description="Footnote size in points")
    line_height: float = Field(..., description="Line height multiplier (2 = double-spaced)")


class MarginRequirements(_RuleRecord):
    top: float
    bottom: float
    left: float
    right: float
    binding: Optional[float] = Field(default=None, description="Additional binding margin in inches")


class PageRequirements(_RuleRecord):
    size: PageSize = PageSize.LETTER
    orientation: Orientation = Orientation.PORTRAIT
    numbering: PageNumbering = PageNumbering.BOTTOM_CENTER
    numbering_start_page: int = 2
    max_pages: Optional[int] = None


class CaptionRequirements(_RuleRecord):
    format: CaptionFormat = CaptionFormat.FEDERAL
    include_court_name: bool = True
    include_case_number: bool = True
    include_judge_name: bool = False
    include_department: bool = False
    include_hearing_info: bool = True
    party_format: PartyFormat = PartyFormat.V
    all_caps: bool = Field(default=True, description="Whether party names are rendered in upper case")


class SignatureRequirements(_RuleRecord):
    format: SignatureFormat = SignatureFormat.BLOCK
    include_bar_number: bool = True
    include_firm_name: bool = True
    include_address: bool = True
    include_phone: bool = True
    include_email: bool = True
    include_fax: bool = False


class TableOfContentsRequirements(_RuleRecord):
    required: bool
    format: TocFormat = TocFormat.DOTTED
    include_page_numbers: bool = True


class TableOfAuthoritiesRequirements(_RuleRecord):
    required: bool
    categorize: bool = Field(default=True, description="Group citations by category")
    categories: List[str] = Field(default=[], description="Order in which categories are listed")
    format: ToaFormat = ToaFormat.BLUEBOOK


class CertificateOfServiceRequirements(_RuleRecord):
    required: bool
    format: CertificateFormat = CertificateFormat.CERTIFICATE
    methods: List[ServiceMethod] = Field(default=[], description="Service methods accepted by the court")


class WordCountRequirements(_RuleRecord):
    has_limit: bool
    max_words: Optional[int] = None
    max_pages: Optional[int] = None
    exclude_caption: bool = True
    exclude_toc: bool = True
    exclude_toa: bool = True
    exclude_signature: bool = True
    exclude_certificate: bool = True
    require_declaration: bool = False


class RuleProfileOverride(_RuleRecord):
    """Partial profile applied on top of a base profile for one document category"""
    court_name: Optional[str] = None
    court_level: Optional[CourtLevel] = None
    jurisdiction: Optional[str] = None
    local_rules_citation: Optional[str] = None
    font: Optional[FontRequirements] = None
    margins: Optional[MarginRequirements] = None
    page: Optional[PageRequirements] = None
    caption: Optional[CaptionRequirements] = None
    signature: Optional[SignatureRequirements] = None
    table_of_contents: Optional[TableOfContentsRequirements] = None
    table_of_authorities: Optional[TableOfAuthoritiesRequirements] = None
    certificate_of_service: Optional[CertificateOfServiceRequirements] = None
    word_count: Optional[WordCountRequirements] = None
    additional_requirements: Optional[List[str]] = None


class RuleProfile(_RuleRecord):
    """Complete formatting and compliance rules for one court"""
    id: str
    court_name: str
    court_level: CourtLevel
    jurisdiction: str = Field(..., description="e.g. 'Federal', 'California', '9th Circuit'")
    local_rules_citation: Optional[str] = Field(default=None, description="e.g. 'N.D. Cal. L.R. 3-4'")

    font: FontRequirements
    margins: MarginRequirements
    page: PageRequirements
    caption: CaptionRequirements
    signature: SignatureRequirements

    table_of_contents: Optional[TableOfContentsRequirements] = None
    table_of_authorities: Optional[TableOfAuthoritiesRequirements] = None
    certificate_of_service: CertificateOfServiceRequirements
    word_count: Optional[WordCountRequirements] = None

    document_overrides: Dict[DocumentCategory, RuleProfileOverride] = Field(default={})
    additional_requirements: List[str] = Field(default=[])

    last_updated: str = ""
    source_url: Optional[str] = None

    def for_document(self, document_type: Optional[DocumentCategory] = None) -> "RuleProfile":
        """
        Return the effective profile for a document category.

        Only the fields set on the category override replace the base fields;
        everything else is taken from this profile unchanged.
        """
        if document_type is None:
            return self
        override = self.document_overrides.get(DocumentCategory(document_type))
        if override is None:
            return self

        merged: Dict[str, Any] = dict(self)
        for field_name in override.model_fields_set:
            merged[field_name] = getattr(override, field_name)
        return RuleProfile.model_validate(merged)

    @model_validator(mode="after")
    def _check_overrides(self) -> "RuleProfile":
        # A category override may clear optional sections but never a required one
        for category, override in self.document_overrides.items():
            for field_name in override.model_fields_set:
                if getattr(override, field_name) is None and RuleProfile.model_fields[field_name].is_required():
                    raise ValueError(
                        f"Override for '{category.value}' clears required field '{field_name}'"
                    )
        return self


# --- DOCUMENT INPUTS ---

class Party(BaseModel):
    name: str
    role: PartyRole
    is_lead_party: bool = True


class CaptionData(BaseModel):
    court_name: str
    court_division: Optional[str] = None
    department: Optional[str] = None
    judge_name: Optional[str] = None
    case_number: str
    plaintiffs: List[Party] = []
    defendants: List[Party] = []
    document_title: str
    hearing_date: Optional[str] = None
    hearing_time: Optional[str] = None
    hearing_location: Optional[str] = None


class AttorneyInfo(BaseModel):
    name: str
    bar_number: str
    bar_state: str
    firm_name: Optional[str] = None
    address: List[str] = []
    phone: str
    fax: Optional[str] = None
    email: str
    representing_party: str = Field(..., description="e.g. 'Plaintiff ABC Corporation'")


class ServiceInfo(BaseModel):
    method: ServiceMethod
    recipient_name: str
    recipient_address: Optional[str] = None
    recipient_email: Optional[str] = None
    date: str


class Heading(BaseModel):
    text: str
    page: int = 1
    level: int = Field(default=1, ge=1, le=4)


class Citation(BaseModel):
    text: str
    pages: List[int] = []
    category: str = "Cases"


# --- RESULTS ---

class ComplianceViolation(BaseModel):
    rule: str
    description: str
    severity: Severity
    suggestion: Optional[str] = None
    location: Optional[str] = None


class ComplianceWarning(BaseModel):
    rule: str
    description: str
    suggestion: Optional[str] = None


class ComplianceResult(BaseModel):
    is_compliant: bool
    violations: List[ComplianceViolation] = []
    warnings: List[ComplianceWarning] = []


class FormattedDocument(BaseModel):
    caption: str
    table_of_contents: Optional[str] = None
    table_of_authorities: Optional[str] = None
    body: str
    signature: str
    certificate_of_service: Optional[str] = None
    word_count_declaration: Optional[str] = None

    word_count: int
    page_count: int
    compliance: ComplianceResult
