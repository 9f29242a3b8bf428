"""State income tax configuration.

One ``StateTaxProfile`` per state plus DC, keyed by tax year and two-letter
code. States that publish a single table use it for every filing status;
states with a married-joint table use the single table for MFS and HOH
unless a head-of-household table is published.

Sources: see ``takehome.engines.sources.STATE_SOURCES``.
"""

from decimal import Decimal

from takehome.engines.brackets import build_brackets
from takehome.engines.sources import STATE_SOURCES
from takehome.models.enums import FilingStatus, StateTaxMethod
from takehome.models.tax_tables import StateTaxProfile, TaxBracket

Bounds = list[tuple[str | None, str]]


def _table(bounds: Bounds) -> tuple[TaxBracket, ...]:
    return build_brackets(
        [(Decimal(upper) if upper is not None else None, Decimal(rate)) for upper, rate in bounds]
    )


def _deduction(single: str, mfj: str, mfs: str, hoh: str) -> dict[FilingStatus, Decimal]:
    return {
        FilingStatus.SINGLE: Decimal(single),
        FilingStatus.MFJ: Decimal(mfj),
        FilingStatus.MFS: Decimal(mfs),
        FilingStatus.HOH: Decimal(hoh),
    }


_FEDERAL_LIKE = ("14600", "29200", "14600", "21900")


def _progressive(
    code: str,
    name: str,
    single: Bounds,
    married: Bounds | None = None,
    head_of_household: Bounds | None = None,
    deduction: tuple[str, str, str, str] | None = None,
    notes: str | None = None,
) -> StateTaxProfile:
    single_table = _table(single)
    return StateTaxProfile(
        code=code,
        name=name,
        method=StateTaxMethod.PROGRESSIVE,
        brackets={
            FilingStatus.SINGLE: single_table,
            FilingStatus.MFJ: _table(married) if married else single_table,
            FilingStatus.MFS: single_table,
            FilingStatus.HOH: _table(head_of_household) if head_of_household else single_table,
        },
        standard_deduction=_deduction(*deduction) if deduction else {},
        source=STATE_SOURCES[code],
        notes=notes,
    )


def _flat(
    code: str,
    name: str,
    rate: str,
    deduction: tuple[str, str, str, str] | None = None,
    notes: str | None = None,
) -> StateTaxProfile:
    return StateTaxProfile(
        code=code,
        name=name,
        method=StateTaxMethod.FLAT,
        flat_rate=Decimal(rate),
        standard_deduction=_deduction(*deduction) if deduction else {},
        source=STATE_SOURCES[code],
        notes=notes,
    )


def _no_tax(code: str, name: str, notes: str | None = None) -> StateTaxProfile:
    return StateTaxProfile(
        code=code,
        name=name,
        method=StateTaxMethod.NONE,
        source=STATE_SOURCES[code],
        notes=notes,
    )


_PROFILES_2026: list[StateTaxProfile] = [
    _progressive(
        "AL", "Alabama",
        single=[("500", "0.02"), ("3000", "0.04"), (None, "0.05")],
        married=[("1000", "0.02"), ("6000", "0.04"), (None, "0.05")],
        deduction=("3000", "8500", "4250", "4700"),
    ),
    _no_tax("AK", "Alaska", notes="No state income tax"),
    _flat("AZ", "Arizona", "0.025", deduction=_FEDERAL_LIKE),
    _progressive(
        "AR", "Arkansas",
        single=[("5100", "0.02"), ("10300", "0.04"), (None, "0.044")],
        deduction=("2340", "4680", "2340", "2340"),
    ),
    _progressive(
        "CA", "California",
        single=[
            ("10412", "0.01"), ("24684", "0.02"), ("38959", "0.04"), ("54081", "0.06"),
            ("68350", "0.08"), ("349137", "0.093"), ("418961", "0.103"), ("698271", "0.113"),
            (None, "0.123"),
        ],
        married=[
            ("20824", "0.01"), ("49368", "0.02"), ("77918", "0.04"), ("108162", "0.06"),
            ("136700", "0.08"), ("698274", "0.093"), ("837922", "0.103"), ("1396542", "0.113"),
            (None, "0.123"),
        ],
        head_of_household=[
            ("20839", "0.01"), ("49371", "0.02"), ("63644", "0.04"), ("78765", "0.06"),
            ("93037", "0.08"), ("474824", "0.093"), ("569790", "0.103"), ("949649", "0.113"),
            (None, "0.123"),
        ],
        deduction=("5540", "11080", "5540", "11080"),
        notes="Mental Health Services Tax surcharge on income over $1M not modelled",
    ),
    _flat("CO", "Colorado", "0.044", deduction=_FEDERAL_LIKE),
    _progressive(
        "CT", "Connecticut",
        single=[
            ("10000", "0.02"), ("50000", "0.045"), ("100000", "0.055"), ("200000", "0.06"),
            ("250000", "0.065"), ("500000", "0.069"), (None, "0.0699"),
        ],
        married=[
            ("20000", "0.02"), ("100000", "0.045"), ("200000", "0.055"), ("400000", "0.06"),
            ("500000", "0.065"), ("1000000", "0.069"), (None, "0.0699"),
        ],
    ),
    _progressive(
        "DE", "Delaware",
        single=[
            ("2000", "0"), ("5000", "0.022"), ("10000", "0.039"), ("20000", "0.048"),
            ("25000", "0.052"), ("60000", "0.0555"), (None, "0.066"),
        ],
        deduction=("3250", "6500", "3250", "3250"),
    ),
    _no_tax("FL", "Florida", notes="No state income tax"),
    _flat("GA", "Georgia", "0.0549", deduction=("12000", "24000", "12000", "18000")),
    _progressive(
        "HI", "Hawaii",
        single=[
            ("2400", "0.014"), ("4800", "0.032"), ("9600", "0.055"), ("14400", "0.064"),
            ("19200", "0.068"), ("24000", "0.072"), ("36000", "0.076"), ("48000", "0.079"),
            ("150000", "0.0825"), ("175000", "0.09"), ("200000", "0.10"), (None, "0.11"),
        ],
        married=[
            ("4800", "0.014"), ("9600", "0.032"), ("19200", "0.055"), ("28800", "0.064"),
            ("38400", "0.068"), ("48000", "0.072"), ("72000", "0.076"), ("96000", "0.079"),
            ("300000", "0.0825"), ("350000", "0.09"), ("400000", "0.10"), (None, "0.11"),
        ],
        deduction=("2200", "4400", "2200", "3212"),
    ),
    _flat("ID", "Idaho", "0.058", deduction=_FEDERAL_LIKE),
    _flat("IL", "Illinois", "0.0495"),
    _flat("IN", "Indiana", "0.0305", notes="County income taxes not modelled"),
    _progressive(
        "IA", "Iowa",
        single=[("6210", "0.044"), ("31050", "0.0482"), ("62100", "0.057"), (None, "0.06")],
        deduction=("2210", "5450", "2210", "5450"),
    ),
    _progressive(
        "KS", "Kansas",
        single=[("15000", "0.031"), ("30000", "0.0525"), (None, "0.057")],
        married=[("30000", "0.031"), ("60000", "0.0525"), (None, "0.057")],
        deduction=("3500", "8000", "4000", "6000"),
    ),
    _flat("KY", "Kentucky", "0.04", deduction=("3160", "6320", "3160", "3160")),
    _progressive(
        "LA", "Louisiana",
        single=[("12500", "0.0185"), ("50000", "0.035"), (None, "0.0425")],
        married=[("25000", "0.0185"), ("100000", "0.035"), (None, "0.0425")],
    ),
    _progressive(
        "ME", "Maine",
        single=[("26050", "0.058"), ("61600", "0.0675"), (None, "0.0715")],
        married=[("52100", "0.058"), ("123250", "0.0675"), (None, "0.0715")],
        deduction=_FEDERAL_LIKE,
    ),
    _progressive(
        "MD", "Maryland",
        single=[
            ("1000", "0.02"), ("2000", "0.03"), ("3000", "0.04"), ("100000", "0.0475"),
            ("125000", "0.05"), ("150000", "0.0525"), ("250000", "0.055"), (None, "0.0575"),
        ],
        married=[
            ("1000", "0.02"), ("2000", "0.03"), ("3000", "0.04"), ("150000", "0.0475"),
            ("175000", "0.05"), ("225000", "0.0525"), ("300000", "0.055"), (None, "0.0575"),
        ],
        deduction=("2550", "5150", "2550", "2550"),
        notes="County income taxes not modelled",
    ),
    _progressive(
        "MA", "Massachusetts",
        single=[("1000000", "0.05"), (None, "0.09")],
        notes="Top bracket includes the 4% surtax on income over $1M",
    ),
    _flat("MI", "Michigan", "0.0405", notes="City income taxes not modelled"),
    _progressive(
        "MN", "Minnesota",
        single=[("31690", "0.0535"), ("104090", "0.068"), ("193240", "0.0785"), (None, "0.0985")],
        married=[("46330", "0.0535"), ("184040", "0.068"), ("321450", "0.0785"), (None, "0.0985")],
        deduction=("14575", "29150", "14575", "21850"),
    ),
    _flat("MS", "Mississippi", "0.05", deduction=("2300", "4600", "2300", "3400")),
    _progressive(
        "MO", "Missouri",
        single=[
            ("1207", "0"), ("2414", "0.02"), ("3621", "0.025"), ("4828", "0.03"),
            ("6035", "0.035"), ("7242", "0.04"), ("8449", "0.045"), (None, "0.048"),
        ],
        deduction=_FEDERAL_LIKE,
    ),
    _progressive(
        "MT", "Montana",
        single=[
            ("3600", "0.01"), ("6500", "0.02"), ("11100", "0.03"), ("15000", "0.04"),
            ("19400", "0.05"), ("22100", "0.06"), (None, "0.059"),
        ],
        deduction=("5540", "11080", "5540", "5540"),
    ),
    _progressive(
        "NE", "Nebraska",
        single=[("3700", "0.0246"), ("22170", "0.0351"), ("35730", "0.0501"), (None, "0.0584")],
        married=[("7390", "0.0246"), ("44350", "0.0351"), ("71460", "0.0501"), (None, "0.0584")],
        deduction=("8100", "16200", "8100", "11800"),
    ),
    _no_tax("NV", "Nevada", notes="No state income tax"),
    _no_tax("NH", "New Hampshire", notes="No tax on wages"),
    _progressive(
        "NJ", "New Jersey",
        single=[
            ("20000", "0.014"), ("35000", "0.0175"), ("40000", "0.035"), ("75000", "0.05525"),
            ("500000", "0.0637"), ("1000000", "0.0897"), (None, "0.1075"),
        ],
        married=[
            ("20000", "0.014"), ("50000", "0.0175"), ("70000", "0.0245"), ("80000", "0.035"),
            ("150000", "0.05525"), ("500000", "0.0637"), ("1000000", "0.0897"), (None, "0.1075"),
        ],
    ),
    _progressive(
        "NM", "New Mexico",
        single=[
            ("5500", "0.017"), ("11000", "0.032"), ("16000", "0.047"), ("210000", "0.049"),
            (None, "0.059"),
        ],
        married=[
            ("8000", "0.017"), ("16000", "0.032"), ("24000", "0.047"), ("315000", "0.049"),
            (None, "0.059"),
        ],
        deduction=_FEDERAL_LIKE,
    ),
    _progressive(
        "NY", "New York",
        single=[
            ("8500", "0.04"), ("11700", "0.045"), ("13900", "0.0525"), ("80650", "0.055"),
            ("215400", "0.06"), ("1077550", "0.0685"), ("5000000", "0.0965"),
            ("25000000", "0.103"), (None, "0.109"),
        ],
        married=[
            ("17150", "0.04"), ("23600", "0.045"), ("27900", "0.0525"), ("161550", "0.055"),
            ("323200", "0.06"), ("2155350", "0.0685"), ("5000000", "0.0965"),
            ("25000000", "0.103"), (None, "0.109"),
        ],
        deduction=("8000", "16050", "8000", "11200"),
        notes="New York City and Yonkers taxes not modelled",
    ),
    _flat("NC", "North Carolina", "0.0475", deduction=("12750", "25500", "12750", "19125")),
    _progressive(
        "ND", "North Dakota",
        single=[("44725", "0.011"), ("225975", "0.0204"), (None, "0.025")],
        deduction=_FEDERAL_LIKE,
    ),
    _progressive(
        "OH", "Ohio",
        single=[("26050", "0"), ("100000", "0.02765"), (None, "0.035")],
        notes="Municipal income taxes not modelled",
    ),
    _progressive(
        "OK", "Oklahoma",
        single=[
            ("1000", "0.0025"), ("2500", "0.0075"), ("3750", "0.0175"), ("4900", "0.0275"),
            ("7200", "0.0375"), (None, "0.0475"),
        ],
        married=[
            ("2000", "0.0025"), ("5000", "0.0075"), ("7500", "0.0175"), ("9800", "0.0275"),
            ("12200", "0.0375"), (None, "0.0475"),
        ],
        deduction=("6350", "12700", "6350", "9350"),
    ),
    _progressive(
        "OR", "Oregon",
        single=[("4300", "0.0475"), ("10750", "0.0675"), ("125000", "0.0875"), (None, "0.099")],
        married=[("8600", "0.0475"), ("21500", "0.0675"), ("250000", "0.0875"), (None, "0.099")],
        deduction=("2745", "5495", "2745", "4420"),
    ),
    _flat("PA", "Pennsylvania", "0.0307", notes="Local earned income taxes not modelled"),
    _progressive(
        "RI", "Rhode Island",
        single=[("73450", "0.0375"), ("166950", "0.0475"), (None, "0.0599")],
        deduction=("10550", "21150", "10550", "15850"),
    ),
    _progressive(
        "SC", "South Carolina",
        single=[("3460", "0"), ("17330", "0.03"), (None, "0.064")],
        deduction=_FEDERAL_LIKE,
    ),
    _no_tax("SD", "South Dakota", notes="No state income tax"),
    _no_tax("TN", "Tennessee", notes="No state income tax"),
    _no_tax("TX", "Texas", notes="No state income tax"),
    _flat("UT", "Utah", "0.0465"),
    _progressive(
        "VT", "Vermont",
        single=[("45400", "0.0335"), ("110050", "0.066"), ("229550", "0.076"), (None, "0.0875")],
        married=[("75850", "0.0335"), ("183400", "0.066"), ("279450", "0.076"), (None, "0.0875")],
        deduction=("7100", "14200", "7100", "10650"),
    ),
    _progressive(
        "VA", "Virginia",
        single=[("3000", "0.02"), ("5000", "0.03"), ("17000", "0.05"), (None, "0.0575")],
        deduction=("8000", "16000", "8000", "8000"),
    ),
    _no_tax("WA", "Washington", notes="No tax on wages"),
    _progressive(
        "WV", "West Virginia",
        single=[
            ("10000", "0.0236"), ("25000", "0.0315"), ("40000", "0.0354"), ("60000", "0.0472"),
            (None, "0.0512"),
        ],
    ),
    _progressive(
        "WI", "Wisconsin",
        single=[("14320", "0.035"), ("28640", "0.044"), ("315310", "0.053"), (None, "0.0765")],
        married=[("19090", "0.035"), ("38190", "0.044"), ("420420", "0.053"), (None, "0.0765")],
        deduction=("13230", "24470", "11400", "17750"),
    ),
    _no_tax("WY", "Wyoming", notes="No state income tax"),
    _progressive(
        "DC", "Washington D.C.",
        single=[
            ("10000", "0.04"), ("40000", "0.06"), ("60000", "0.065"), ("250000", "0.085"),
            ("500000", "0.0925"), ("1000000", "0.0975"), (None, "0.1075"),
        ],
        deduction=_FEDERAL_LIKE,
    ),
]

# ---------------------------------------------------------------------------
# State profiles: {year: {code: profile}}
# ---------------------------------------------------------------------------
STATE_PROFILES: dict[int, dict[str, StateTaxProfile]] = {
    2026: {profile.code: profile for profile in _PROFILES_2026},
}


def list_states(year: int = 2026) -> list[StateTaxProfile]:
    """All profiles for ``year`` sorted by state name."""
    return sorted(STATE_PROFILES.get(year, {}).values(), key=lambda p: p.name)


def codes_by_method(method: StateTaxMethod, year: int = 2026) -> list[str]:
    return sorted(
        code for code, profile in STATE_PROFILES.get(year, {}).items() if profile.method == method
    )


def no_income_tax_states(year: int = 2026) -> list[str]:
    return codes_by_method(StateTaxMethod.NONE, year)


def flat_tax_states(year: int = 2026) -> list[str]:
    return codes_by_method(StateTaxMethod.FLAT, year)


def progressive_tax_states(year: int = 2026) -> list[str]:
    return codes_by_method(StateTaxMethod.PROGRESSIVE, year)
