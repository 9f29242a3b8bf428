"""Enumerations for takehome."""

from enum import StrEnum


class FilingStatus(StrEnum):
    SINGLE = "SINGLE"
    MFJ = "MARRIED_FILING_JOINTLY"
    MFS = "MARRIED_FILING_SEPARATELY"
    HOH = "HEAD_OF_HOUSEHOLD"


class PayFrequency(StrEnum):
    HOURLY = "HOURLY"
    WEEKLY = "WEEKLY"
    BIWEEKLY = "BIWEEKLY"
    SEMIMONTHLY = "SEMIMONTHLY"
    MONTHLY = "MONTHLY"
    ANNUAL = "ANNUAL"


class StateTaxMethod(StrEnum):
    PROGRESSIVE = "PROGRESSIVE"
    FLAT = "FLAT"
    NONE = "NONE"


class UpdateFrequency(StrEnum):
    ANNUAL = "ANNUAL"
    QUARTERLY = "QUARTERLY"
    MONTHLY = "MONTHLY"
    AS_NEEDED = "AS_NEEDED"
