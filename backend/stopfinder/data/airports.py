"""Region catalog — 2-letter region codes, their airports and their neighbors.

The first airport of each region is its main international gateway.
"""

from types import MappingProxyType

_REGION_AIRPORTS: dict[str, tuple[str, ...]] = {
    # Central & Eastern Europe
    "PL": ("WAW", "KRK", "GDN", "WRO", "POZ", "KTW", "RZE", "BZG"),
    "CZ": ("PRG", "BRQ"),
    "SK": ("BTS",),
    "HU": ("BUD",),
    "AT": ("VIE", "SZG", "INN"),
    "SI": ("LJU",),
    "HR": ("ZAG", "SPU", "DBV"),
    "RO": ("OTP", "CLJ"),
    "BG": ("SOF", "BOJ"),
    "RS": ("BEG",),
    "LT": ("VNO",),
    "LV": ("RIX",),
    "EE": ("TLL",),
    "RU": ("SVO", "DME", "LED"),
    # Western Europe
    "DE": ("FRA", "MUC", "BER", "DUS", "HAM", "CGN", "STR"),
    "GB": ("LHR", "LGW", "STN", "MAN", "BHX", "EDI", "GLA"),
    "FR": ("CDG", "ORY", "NCE", "LYS", "MRS", "TLS", "NTE"),
    "IT": ("FCO", "MXP", "LIN", "NAP", "VCE", "BGY", "BLQ"),
    "ES": ("MAD", "BCN", "PMI", "VLC", "AGP", "BIO", "LPA"),
    "NL": ("AMS", "RTM", "EIN"),
    "BE": ("BRU", "ANR", "CRL"),
    "CH": ("ZRH", "GVA", "BSL"),
    "PT": ("LIS", "OPO", "FAO"),
    "IE": ("DUB", "ORK", "SNN"),
    "GR": ("ATH", "SKG", "HER"),
    # Nordics
    "DK": ("CPH", "AAL", "BLL"),
    "SE": ("ARN", "GOT", "MMX"),
    "NO": ("OSL", "BGO", "TRD"),
    "FI": ("HEL", "TMP", "OUL"),
    # Middle East & Turkey
    "TR": ("IST", "SAW", "ADB", "AYT", "ESB"),
    "AE": ("DXB", "AUH", "SHJ", "RKT"),
    "QA": ("DOH",),
    "SA": ("RUH", "JED", "DMM"),
    "KW": ("KWI",),
    "BH": ("BAH",),
    "OM": ("MCT",),
    "JO": ("AMM",),
    "IL": ("TLV",),
    "LB": ("BEY",),
    "IR": ("IKA", "SYZ"),
    # Africa
    "EG": ("CAI",),
    "ZA": ("JNB", "CPT", "DUR"),
    "NG": ("LOS", "ABV"),
    "KE": ("NBO", "MBA"),
    "ET": ("ADD",),
    "MA": ("CMN", "RAK"),
    "TN": ("TUN",),
    "DZ": ("ALG",),
    # Southeast Asia
    "TH": ("BKK", "DMK", "CNX", "HKT", "HDY", "USM", "UTP"),
    "VN": ("SGN", "HAN", "DAD"),
    "ID": ("CGK", "DPS", "SUB", "MLG"),
    "MY": ("KUL", "JHB", "KCH", "PEN"),
    "SG": ("SIN",),
    "PH": ("MNL", "CEB"),
    "KH": ("PNH",),
    "LA": ("VTE",),
    "MM": ("RGN",),
    "BN": ("BWN",),
    # East Asia
    "JP": ("NRT", "HND", "KIX", "NGO", "CTS", "FUK", "OKA"),
    "KR": ("ICN", "GMP", "PUS"),
    "CN": ("PEK", "PVG", "CAN", "SZX", "CTU", "XIY"),
    "TW": ("TPE", "KHH"),
    # South Asia
    "IN": ("DEL", "BOM", "BLR", "MAA", "CCU", "HYD"),
    "LK": ("CMB",),
    "NP": ("KTM",),
    "BD": ("DAC",),
    "PK": ("KHI", "LHE", "ISB"),
    # Americas
    "US": ("JFK", "LAX", "ORD", "DFW", "ATL", "MIA", "SFO"),
    "CA": ("YYZ", "YVR", "YUL", "YYC"),
    "MX": ("MEX", "CUN", "GDL"),
    "BR": ("GRU", "GIG", "BSB", "FOR"),
    "AR": ("EZE", "AEP"),
    "CL": ("SCL",),
    "PE": ("LIM",),
    "CO": ("BOG", "CTG"),
    "PA": ("PTY",),
    # Oceania
    "AU": ("SYD", "MEL", "BNE", "PER", "ADL"),
    "NZ": ("AKL", "WLG", "CHC"),
    "FJ": ("NAN",),
}

# Neighbor graph, most relevant neighbor first. Neighbors without an entry
# in the region catalog contribute no airports.
_NEIGHBOR_REGIONS: dict[str, tuple[str, ...]] = {
    # Europe
    "PL": ("DE", "CZ", "SK", "UA", "BY", "LT"),
    "DE": ("PL", "CZ", "AT", "CH", "FR", "BE", "NL", "DK"),
    "FR": ("ES", "IT", "DE", "CH", "BE", "GB"),
    "IT": ("FR", "CH", "AT", "SI", "ES"),
    "ES": ("FR", "PT", "IT"),
    "GB": ("FR", "IE", "NL", "BE"),
    "NL": ("DE", "BE", "GB", "FR"),
    "BE": ("FR", "NL", "DE", "GB"),
    "CH": ("DE", "FR", "IT", "AT"),
    "AT": ("DE", "IT", "CH", "SI", "CZ", "SK"),
    "CZ": ("DE", "PL", "AT", "SK"),
    "SK": ("CZ", "PL", "AT", "UA"),
    "HU": ("AT", "SK", "RO", "RS", "HR", "SI"),
    "RO": ("HU", "BG", "RS", "UA", "MD"),
    "BG": ("RO", "GR", "TR", "RS"),
    "GR": ("BG", "TR", "AL", "MK"),
    "TR": ("GR", "BG", "GE", "AM", "IR", "IQ", "SY"),
    "SE": ("NO", "FI", "DK"),
    "NO": ("SE", "FI", "DK"),
    "FI": ("SE", "NO", "RU", "EE"),
    "DK": ("DE", "SE", "NO"),
    "PT": ("ES",),
    "IE": ("GB",),
    # North America
    "US": ("CA", "MX"),
    "CA": ("US",),
    "MX": ("US", "GT"),
    # Asia
    "CN": ("RU", "MN", "KZ", "KG", "TJ", "AF", "PK", "IN", "NP", "BT", "MM", "LA", "VN", "KP", "KR"),
    "IN": ("PK", "CN", "NP", "BT", "MM", "BD", "LK"),
    "JP": ("KR", "CN", "RU"),
    "KR": ("CN", "KP", "JP"),
    "TH": ("MM", "LA", "KH", "MY"),
    "VN": ("CN", "LA", "KH"),
    "MY": ("TH", "SG", "ID", "BN"),
    "SG": ("MY", "ID"),
    "ID": ("MY", "SG", "TL", "PG"),
    "PH": ("TW", "CN", "MY", "ID"),
    # Middle East
    "AE": ("SA", "OM", "QA", "IR"),
    "SA": ("AE", "OM", "YE", "QA", "BH", "KW", "IQ", "JO"),
    "QA": ("SA", "AE", "BH"),
    "KW": ("SA", "IQ"),
    "BH": ("SA", "QA"),
    "OM": ("AE", "SA", "YE"),
    "IR": ("TR", "IQ", "AF", "PK", "TM", "AZ", "AM"),
    "JO": ("IQ", "SA", "SY", "IL", "PS"),
    "IL": ("JO", "SY", "LB", "EG", "PS"),
    "EG": ("LY", "SD", "IL", "PS"),
    # Africa
    "ZA": ("NA", "BW", "ZW", "MZ", "SZ", "LS"),
    "NG": ("NE", "TD", "CM", "BJ"),
    "KE": ("ET", "SO", "TZ", "UG", "SS"),
    "ET": ("ER", "DJ", "SO", "KE", "SS", "SD"),
    "MA": ("DZ", "ES"),
    "TN": ("DZ", "LY"),
    "DZ": ("MA", "TN", "LY", "NE", "ML", "MR"),
    # Oceania
    "AU": ("NZ", "PG", "ID", "TL"),
    "NZ": ("AU",),
    # South America
    "BR": ("UY", "AR", "PY", "BO", "PE", "CO", "VE", "GY", "SR", "GF"),
    "AR": ("CL", "BO", "PY", "BR", "UY"),
    "CL": ("AR", "BO", "PE"),
    "PE": ("EC", "CO", "BR", "BO", "CL"),
    "CO": ("VE", "GY", "BR", "PE", "EC", "PA"),
}

REGION_AIRPORTS = MappingProxyType(_REGION_AIRPORTS)
NEIGHBOR_REGIONS = MappingProxyType(_NEIGHBOR_REGIONS)

# Airport → region (reverse index of REGION_AIRPORTS)
AIRPORT_REGIONS = MappingProxyType({
    airport: region
    for region, airports in _REGION_AIRPORTS.items()
    for airport in airports
})

# Region groups used by the long-haul and hub rules
EUROPE = frozenset({
    "PL", "CZ", "SK", "HU", "AT", "SI", "HR", "RO", "BG", "RS", "LT", "LV", "EE",
    "DE", "GB", "FR", "IT", "ES", "NL", "BE", "CH", "PT", "IE", "GR",
    "DK", "SE", "NO", "FI",
})
SOUTHEAST_ASIA = frozenset({"TH", "VN", "ID", "MY", "SG", "PH", "KH", "LA", "MM", "BN"})
EAST_ASIA = frozenset({"JP", "KR", "CN", "TW"})
SOUTH_ASIA = frozenset({"IN", "LK", "NP", "BD"})
OCEANIA = frozenset({"AU", "NZ", "FJ"})
