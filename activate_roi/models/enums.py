from enum import Enum, IntEnum


class Scenario(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class WizardStep(IntEnum):
    PROFILE = 0
    USE_CASES = 1
    PAIN = 2
    ASSUMPTIONS = 3
    REVIEW = 4


class DataIssueFrequency(str, Enum):
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    RARELY = "Rarely"


class DealStage(str, Enum):
    DISCOVERY = "Discovery"
    PROPOSAL = "Proposal"
    NEGOTIATION = "Negotiation"
    CLOSED_WON = "Closed Won"


class ReportStatus(str, Enum):
    DRAFT = "Draft"
    SENT = "Sent"
    PRESENTED = "Presented"


class SortKey(str, Enum):
    CREATED = "created"
    ROI = "roi"
    VALUE = "value"


class Page(str, Enum):
    BUILDER = "builder"
    REPORT = "report"
    LIBRARY = "library"
