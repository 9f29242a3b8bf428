"""Citations for the reference data behind each calculation.

Display-only metadata: nothing in the tax computation reads it. Each
result carries the federal, FICA and state sources it was computed from.
"""

from datetime import date, timedelta

from takehome.models.enums import UpdateFrequency
from takehome.models.tax_tables import DataSource

_VERIFIED = date(2026, 1, 15)

FEDERAL_SOURCE = DataSource(
    name="IRS Publication 15-T",
    organization="Internal Revenue Service",
    url="https://www.irs.gov/publications/p15t",
    last_verified=_VERIFIED,
    data_types=("Federal income tax brackets", "Withholding tables", "Tax rates by filing status"),
    notes=(
        "Publication 15-T provides employer withholding tables. Actual tax "
        "liability may differ slightly from withholding estimates."
    ),
)

FICA_SOURCE = DataSource(
    name="IRS Publication 15 (Circular E)",
    organization="Internal Revenue Service",
    url="https://www.irs.gov/publications/p15",
    last_verified=_VERIFIED,
    data_types=(
        "Social Security tax rate",
        "Medicare tax rate",
        "FICA wage base",
        "Additional Medicare tax",
    ),
)

IRS_RATES_SOURCE = DataSource(
    name="IRS Tax Rates and Brackets",
    organization="Internal Revenue Service",
    url="https://www.irs.gov/filing/federal-income-tax-rates-and-brackets",
    last_verified=_VERIFIED,
    data_types=("Federal tax brackets", "Marginal rates", "Filing status thresholds"),
)

TAX_DISCLAIMER = (
    "This calculator provides estimates for informational purposes only. Tax rates "
    "and rules change frequently. Calculations use 2026 tax year data from IRS "
    "Publications 15 and 15-T and individual state tax authorities. Actual tax "
    "liability may vary based on additional income, deductions, credits and local "
    "taxes. Consult a qualified tax professional for advice."
)

_ANNUAL = UpdateFrequency.ANNUAL
_AS_NEEDED = UpdateFrequency.AS_NEEDED

# (code, short name, organization, url, update frequency)
_STATE_SOURCE_ROWS: list[tuple[str, str, str, str, UpdateFrequency]] = [
    ("AL", "Alabama DOR", "Alabama Department of Revenue", "https://revenue.alabama.gov/individual-corporate/taxes-administered-by-individual-corporate-income-tax/individual-income-tax/", _ANNUAL),
    ("AK", "Alaska DOR", "Alaska Department of Revenue", "https://tax.alaska.gov/", _AS_NEEDED),
    ("AZ", "Arizona ADOR", "Arizona Department of Revenue", "https://azdor.gov/individual-income-tax-information", _ANNUAL),
    ("AR", "Arkansas DFA", "Arkansas Department of Finance and Administration", "https://www.dfa.arkansas.gov/income-tax/individual-income-tax/", _ANNUAL),
    ("CA", "California FTB", "California Franchise Tax Board", "https://www.ftb.ca.gov/file/personal/tax-rates.html", _ANNUAL),
    ("CO", "Colorado DOR", "Colorado Department of Revenue", "https://tax.colorado.gov/individual-income-tax", _ANNUAL),
    ("CT", "Connecticut DRS", "Connecticut Department of Revenue Services", "https://portal.ct.gov/DRS/Individuals/Individual-Tax-Types/Income-Tax", _ANNUAL),
    ("DE", "Delaware DOR", "Delaware Division of Revenue", "https://revenue.delaware.gov/personal-income-tax/", _ANNUAL),
    ("FL", "Florida DOR", "Florida Department of Revenue", "https://floridarevenue.com/", _AS_NEEDED),
    ("GA", "Georgia DOR", "Georgia Department of Revenue", "https://dor.georgia.gov/taxes/individual-taxes/income-tax", _ANNUAL),
    ("HI", "Hawaii DOTAX", "Hawaii Department of Taxation", "https://tax.hawaii.gov/geninfo/a2_b2_5indiv_income/", _ANNUAL),
    ("ID", "Idaho Tax Commission", "Idaho State Tax Commission", "https://tax.idaho.gov/i-1042.cfm", _ANNUAL),
    ("IL", "Illinois DOR", "Illinois Department of Revenue", "https://www2.illinois.gov/rev/individuals/Pages/default.aspx", _ANNUAL),
    ("IN", "Indiana DOR", "Indiana Department of Revenue", "https://www.in.gov/dor/individual-income-taxes/", _ANNUAL),
    ("IA", "Iowa DOR", "Iowa Department of Revenue", "https://tax.iowa.gov/individual-income-tax", _ANNUAL),
    ("KS", "Kansas DOR", "Kansas Department of Revenue", "https://www.ksrevenue.gov/perincm.html", _ANNUAL),
    ("KY", "Kentucky DOR", "Kentucky Department of Revenue", "https://revenue.ky.gov/Individual/Pages/Individual-Income-Tax.aspx", _ANNUAL),
    ("LA", "Louisiana DOR", "Louisiana Department of Revenue", "https://revenue.louisiana.gov/IndividualIncomeTax", _ANNUAL),
    ("ME", "Maine Revenue", "Maine Revenue Services", "https://www.maine.gov/revenue/taxes/income-estate-tax/individual-income-tax", _ANNUAL),
    ("MD", "Maryland Comptroller", "Comptroller of Maryland", "https://www.marylandtaxes.gov/individual/income/tax-info/tax-rates.php", _ANNUAL),
    ("MA", "Massachusetts DOR", "Massachusetts Department of Revenue", "https://www.mass.gov/info-details/massachusetts-personal-income-tax-rates", _ANNUAL),
    ("MI", "Michigan Treasury", "Michigan Department of Treasury", "https://www.michigan.gov/taxes/iit", _ANNUAL),
    ("MN", "Minnesota DOR", "Minnesota Department of Revenue", "https://www.revenue.state.mn.us/individual-income-tax", _ANNUAL),
    ("MS", "Mississippi DOR", "Mississippi Department of Revenue", "https://www.dor.ms.gov/individual/individual-income-tax", _ANNUAL),
    ("MO", "Missouri DOR", "Missouri Department of Revenue", "https://dor.mo.gov/personal/individual/", _ANNUAL),
    ("MT", "Montana DOR", "Montana Department of Revenue", "https://mtrevenue.gov/taxes/individual-income-tax/", _ANNUAL),
    ("NE", "Nebraska DOR", "Nebraska Department of Revenue", "https://revenue.nebraska.gov/individuals", _ANNUAL),
    ("NV", "Nevada Tax", "Nevada Department of Taxation", "https://tax.nv.gov/", _AS_NEEDED),
    ("NH", "New Hampshire DRA", "New Hampshire Department of Revenue Administration", "https://www.revenue.nh.gov/", _AS_NEEDED),
    ("NJ", "New Jersey Treasury", "New Jersey Division of Taxation", "https://www.state.nj.us/treasury/taxation/njit.shtml", _ANNUAL),
    ("NM", "New Mexico TRD", "New Mexico Taxation and Revenue Department", "https://www.tax.newmexico.gov/individuals/personal-income-tax/", _ANNUAL),
    ("NY", "New York DTF", "New York State Department of Taxation and Finance", "https://www.tax.ny.gov/pit/file/personal_income_tax.htm", _ANNUAL),
    ("NC", "North Carolina DOR", "North Carolina Department of Revenue", "https://www.ncdor.gov/taxes-forms/individual-income-tax", _ANNUAL),
    ("ND", "North Dakota Tax", "North Dakota Tax Department", "https://www.tax.nd.gov/individual", _ANNUAL),
    ("OH", "Ohio Tax", "Ohio Department of Taxation", "https://tax.ohio.gov/individual", _ANNUAL),
    ("OK", "Oklahoma Tax Commission", "Oklahoma Tax Commission", "https://oklahoma.gov/tax/individuals/income-tax.html", _ANNUAL),
    ("OR", "Oregon DOR", "Oregon Department of Revenue", "https://www.oregon.gov/dor/programs/individuals/pages/pit.aspx", _ANNUAL),
    ("PA", "Pennsylvania DOR", "Pennsylvania Department of Revenue", "https://www.revenue.pa.gov/TaxTypes/PIT/Pages/default.aspx", _ANNUAL),
    ("RI", "Rhode Island Tax", "Rhode Island Division of Taxation", "https://tax.ri.gov/tax-sections/personal-income-tax", _ANNUAL),
    ("SC", "South Carolina DOR", "South Carolina Department of Revenue", "https://dor.sc.gov/tax/individual-income", _ANNUAL),
    ("SD", "South Dakota DOR", "South Dakota Department of Revenue", "https://dor.sd.gov/", _AS_NEEDED),
    ("TN", "Tennessee DOR", "Tennessee Department of Revenue", "https://www.tn.gov/revenue/taxes.html", _AS_NEEDED),
    ("TX", "Texas Comptroller", "Texas Comptroller of Public Accounts", "https://comptroller.texas.gov/taxes/", _AS_NEEDED),
    ("UT", "Utah State Tax", "Utah State Tax Commission", "https://incometax.utah.gov/", _ANNUAL),
    ("VT", "Vermont Tax", "Vermont Department of Taxes", "https://tax.vermont.gov/individuals", _ANNUAL),
    ("VA", "Virginia Tax", "Virginia Department of Taxation", "https://www.tax.virginia.gov/individual-income-tax", _ANNUAL),
    ("WA", "Washington DOR", "Washington Department of Revenue", "https://dor.wa.gov/", _AS_NEEDED),
    ("WV", "West Virginia Tax", "West Virginia State Tax Department", "https://tax.wv.gov/Individuals/PersonalIncomeTax/Pages/PersonalIncomeTax.aspx", _ANNUAL),
    ("WI", "Wisconsin DOR", "Wisconsin Department of Revenue", "https://www.revenue.wi.gov/Pages/FAQS/ise-indincm.aspx", _ANNUAL),
    ("WY", "Wyoming DOR", "Wyoming Department of Revenue", "https://revenue.wyo.gov/", _AS_NEEDED),
    ("DC", "DC OTR", "DC Office of Tax and Revenue", "https://otr.cfo.dc.gov/page/individual-income-and-franchise-taxes", _ANNUAL),
]

# CA brackets were re-verified after the January FTB release.
_VERIFIED_OVERRIDES: dict[str, date] = {"CA": date(2026, 1, 20)}

STATE_SOURCES: dict[str, DataSource] = {
    code: DataSource(
        name=name,
        organization=organization,
        url=url,
        last_verified=_VERIFIED_OVERRIDES.get(code, _VERIFIED),
        update_frequency=frequency,
    )
    for code, name, organization, url, frequency in _STATE_SOURCE_ROWS
}


def get_state_source(state_code: str) -> DataSource | None:
    if not isinstance(state_code, str):
        return None
    return STATE_SOURCES.get(state_code.strip().upper())


def all_sources() -> list[DataSource]:
    """Federal, FICA and IRS sources followed by every state source."""
    return [FEDERAL_SOURCE, FICA_SOURCE, IRS_RATES_SOURCE, *STATE_SOURCES.values()]


def get_outdated_sources(as_of: date, days_threshold: int = 90) -> list[DataSource]:
    """Return sources last verified more than ``days_threshold`` days before ``as_of``."""
    cutoff = as_of - timedelta(days=days_threshold)
    return [source for source in all_sources() if source.last_verified < cutoff]


def format_source_citation(source: DataSource) -> str:
    return (
        f"{source.name}. {source.organization}. "
        f"Verified {source.last_verified.isoformat()}. {source.url}"
    )
