"""Static route tables — flight durations, reference fares and display names.

Keys are "ORIGIN-DESTINATION". Lookups fall back to the reverse pair.
Fares are one-way economy per adult, in PLN.
"""

from types import MappingProxyType

FLIGHT_DURATIONS = MappingProxyType({
    # Europe → hubs
    "WAW-DXB": 375, "KRK-DXB": 370, "GDN-DXB": 400, "WRO-DXB": 385, "KTW-DXB": 365,
    "WAW-DOH": 360, "KRK-DOH": 355, "GDN-DOH": 385,
    "WAW-IST": 150, "KRK-IST": 140, "GDN-IST": 175, "WRO-IST": 160, "POZ-IST": 170,
    "WAW-AUH": 380, "KRK-AUH": 375,
    "FRA-DXB": 375, "MUC-DXB": 355, "BER-DXB": 390, "FRA-DOH": 370, "MUC-DOH": 350,
    "FRA-IST": 195, "MUC-IST": 170, "BER-IST": 185, "FRA-AUH": 380,
    "LHR-DXB": 420, "LHR-DOH": 405, "LHR-IST": 235, "LHR-AUH": 425,
    "CDG-DXB": 400, "CDG-DOH": 390, "CDG-IST": 210, "AMS-DXB": 405, "AMS-IST": 220,
    "PRG-DXB": 370, "PRG-IST": 155, "VIE-DXB": 340, "VIE-IST": 135, "BUD-IST": 125,
    "FRA-SIN": 730, "LHR-SIN": 780, "WAW-SIN": 700,
    # Hubs → Asia / Oceania
    "DXB-BKK": 380, "DOH-BKK": 405, "IST-BKK": 590, "AUH-BKK": 385,
    "DXB-DMK": 385, "DXB-HKT": 405, "DOH-HKT": 420, "IST-HKT": 620, "AUH-HKT": 410,
    "DXB-CNX": 440, "DOH-CNX": 455,
    "DXB-SIN": 455, "DOH-SIN": 460, "IST-SIN": 690, "AUH-SIN": 450,
    "DXB-KUL": 430, "DOH-KUL": 450, "IST-KUL": 655,
    "DXB-CGK": 470, "DOH-CGK": 490, "DXB-DPS": 545, "DOH-DPS": 560,
    "DXB-SGN": 415, "DOH-SGN": 430, "DXB-HAN": 405, "DXB-MNL": 520,
    "DXB-NRT": 580, "DOH-NRT": 610, "IST-NRT": 690, "DXB-HND": 580, "DOH-HND": 605,
    "DXB-KIX": 560, "DXB-ICN": 530, "IST-ICN": 620, "DXB-PEK": 470, "DXB-PVG": 505,
    "DXB-DEL": 190, "DOH-DEL": 225, "AUH-DEL": 195, "DXB-BOM": 175, "DXB-CMB": 275,
    "DXB-SYD": 835, "DOH-SYD": 850, "SIN-SYD": 480, "SIN-MEL": 465, "DXB-MEL": 850,
    "SIN-AKL": 585, "DXB-AKL": 1005,
    # Direct long-haul
    "WAW-BKK": 625, "WAW-HKT": 665, "WAW-SIN": 700, "WAW-NRT": 690, "WAW-ICN": 640,
    "WAW-DEL": 420, "FRA-BKK": 645, "MUC-BKK": 630, "LHR-BKK": 690, "CDG-BKK": 680,
    "FRA-NRT": 700, "LHR-NRT": 730, "FRA-SYD": 1320, "LHR-SYD": 1330,
})

DIRECT_PRICES = MappingProxyType({
    "WAW-BKK": 3200.0, "KRK-BKK": 3350.0, "GDN-BKK": 3450.0, "WRO-BKK": 3400.0,
    "WAW-DMK": 3100.0, "WAW-HKT": 3600.0, "KRK-HKT": 3700.0, "WAW-CNX": 3800.0,
    "WAW-SIN": 3700.0, "WAW-KUL": 3500.0, "WAW-SGN": 3600.0, "WAW-HAN": 3600.0,
    "WAW-CGK": 4000.0, "WAW-DPS": 4300.0, "WAW-MNL": 4100.0,
    "WAW-NRT": 4200.0, "WAW-HND": 4300.0, "WAW-KIX": 4400.0, "WAW-ICN": 3900.0,
    "WAW-PEK": 3400.0, "WAW-PVG": 3500.0,
    "WAW-DEL": 2600.0, "WAW-BOM": 2800.0, "WAW-CMB": 3300.0,
    "WAW-SYD": 6200.0, "WAW-MEL": 6300.0, "WAW-AKL": 7200.0,
    "FRA-BKK": 3000.0, "MUC-BKK": 3050.0, "BER-BKK": 3100.0,
    "LHR-BKK": 3100.0, "CDG-BKK": 3150.0, "AMS-BKK": 3100.0,
    "FRA-NRT": 4000.0, "LHR-NRT": 4100.0, "FRA-SYD": 5900.0, "LHR-SYD": 6000.0,
})

LEG_PRICES = MappingProxyType({
    # Europe → hubs
    "WAW-DXB": 1300.0, "KRK-DXB": 1350.0, "GDN-DXB": 1400.0, "WRO-DXB": 1380.0, "KTW-DXB": 1250.0,
    "WAW-DOH": 1400.0, "KRK-DOH": 1450.0, "GDN-DOH": 1480.0,
    "WAW-IST": 650.0, "KRK-IST": 700.0, "GDN-IST": 720.0, "WRO-IST": 690.0, "POZ-IST": 700.0,
    "WAW-AUH": 1350.0, "KRK-AUH": 1400.0,
    "FRA-DXB": 1250.0, "MUC-DXB": 1280.0, "BER-DXB": 1300.0, "FRA-DOH": 1350.0, "MUC-DOH": 1370.0,
    "FRA-IST": 600.0, "MUC-IST": 580.0, "BER-IST": 560.0, "FRA-AUH": 1300.0,
    "LHR-DXB": 1450.0, "LHR-DOH": 1500.0, "LHR-IST": 800.0, "LHR-AUH": 1400.0,
    "CDG-DXB": 1400.0, "CDG-DOH": 1450.0, "CDG-IST": 700.0, "AMS-DXB": 1350.0, "AMS-IST": 680.0,
    "PRG-DXB": 1300.0, "PRG-IST": 620.0, "VIE-DXB": 1200.0, "VIE-IST": 540.0, "BUD-IST": 480.0,
    "WAW-SIN": 2700.0, "FRA-SIN": 2600.0, "LHR-SIN": 2800.0,
    # Hubs → Asia / Oceania
    "DXB-BKK": 1500.0, "DOH-BKK": 1550.0, "IST-BKK": 2300.0, "AUH-BKK": 1450.0,
    "DXB-DMK": 1400.0, "DXB-HKT": 1650.0, "DOH-HKT": 1700.0, "IST-HKT": 2500.0, "AUH-HKT": 1600.0,
    "DXB-CNX": 1800.0, "DOH-CNX": 1850.0,
    "DXB-SIN": 1700.0, "DOH-SIN": 1750.0, "IST-SIN": 2400.0, "AUH-SIN": 1650.0,
    "DXB-KUL": 1600.0, "DOH-KUL": 1650.0, "IST-KUL": 2350.0,
    "DXB-CGK": 1800.0, "DOH-CGK": 1850.0, "DXB-DPS": 1900.0, "DOH-DPS": 1950.0,
    "DXB-SGN": 1700.0, "DOH-SGN": 1750.0, "DXB-HAN": 1700.0, "DXB-MNL": 1850.0,
    "DXB-NRT": 2600.0, "DOH-NRT": 2700.0, "IST-NRT": 2900.0, "DXB-HND": 2650.0, "DOH-HND": 2750.0,
    "DXB-KIX": 2600.0, "DXB-ICN": 2400.0, "IST-ICN": 2700.0, "DXB-PEK": 2200.0, "DXB-PVG": 2300.0,
    "DXB-DEL": 700.0, "DOH-DEL": 750.0, "AUH-DEL": 680.0, "DXB-BOM": 650.0, "DXB-CMB": 1100.0,
    "DXB-SYD": 3400.0, "DOH-SYD": 3500.0, "SIN-SYD": 1600.0, "SIN-MEL": 1650.0, "DXB-MEL": 3450.0,
    "SIN-AKL": 2100.0, "DXB-AKL": 4200.0,
})

AIRCRAFT_TYPES: tuple[str, ...] = ("77W", "388", "359", "789", "333", "321")

# Carrier used for synthetic direct flights, by origin region
HOME_CARRIERS = MappingProxyType({
    "PL": "LO", "DE": "LH", "AT": "OS", "CH": "LX", "FR": "AF", "NL": "KL",
    "GB": "BA", "ES": "IB", "IT": "AZ", "FI": "AY", "DK": "SK", "SE": "SK", "NO": "SK",
    "TR": "TK", "AE": "EK", "QA": "QR", "SG": "SQ", "TH": "TG", "JP": "NH", "KR": "KE",
})
DEFAULT_CARRIER = "LH"

CARRIER_NAMES = MappingProxyType({
    "LO": "LOT Polish Airlines", "LH": "Lufthansa", "OS": "Austrian", "LX": "Swiss",
    "AF": "Air France", "KL": "KLM", "BA": "British Airways", "IB": "Iberia",
    "AZ": "ITA Airways", "AY": "Finnair", "SK": "SAS", "TK": "Turkish Airlines",
    "EK": "Emirates", "FZ": "flydubai", "QR": "Qatar Airways", "EY": "Etihad Airways",
    "SQ": "Singapore Airlines", "TR": "Scoot", "TG": "Thai Airways", "NH": "ANA",
    "KE": "Korean Air",
})

AIRCRAFT_NAMES = MappingProxyType({
    "77W": "Boeing 777-300ER",
    "388": "Airbus A380-800",
    "359": "Airbus A350-900",
    "789": "Boeing 787-9",
    "333": "Airbus A330-300",
    "321": "Airbus A321",
    "738": "Boeing 737-800",
})


def route_key(origin: str, destination: str) -> str:
    return f"{origin}-{destination}"


def lookup_route(table, origin: str, destination: str, default):
    """Value for origin→destination, else destination→origin, else default."""
    value = table.get(route_key(origin, destination))
    if value is None:
        value = table.get(route_key(destination, origin))
    return default if value is None else value
