"""
Currency Catalogue - Codes Offered in the Currency Selectors

ISO 4217 codes supported by ExchangeRate-API, kept as a static table so the
window can be built without a network round-trip.

Files that USE this module:
- xconvert.app (combobox values, with the configured defaults added)
"""
from typing import Iterable, List

_CODES = """
AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND BOB
BRL BSD BTN BWP BYN BZD CAD CDF CHF CLP CNY COP CRC CUP CVE CZK DJF DKK DOP
DZD EGP ERN ETB EUR FJD FKP FOK GBP GEL GGP GHS GIP GMD GNF GTQ GYD HKD HNL
HRK HTG HUF IDR ILS IMP INR IQD IRR ISK JEP JMD JOD JPY KES KGS KHR KID KMF
KRW KWD KYD KZT LAK LBP LKR LRD LSL LYD MAD MDL MGA MKD MMK MNT MOP MRU MUR
MVR MWK MXN MYR MZN NAD NGN NIO NOK NPR NZD OMR PAB PEN PGK PHP PKR PLN PYG
QAR RON RSD RUB RWF SAR SBD SCR SDG SEK SGD SHP SLE SLL SOS SRD SSP STN SYP
SZL THB TJS TMT TND TOP TRY TTD TVD TWD TZS UAH UGX USD UYU UZS VES VND VUV
WST XAF XCD XDR XOF XPF YER ZAR ZMW ZWL
"""

SUPPORTED_CURRENCIES: tuple = tuple(sorted(set(_CODES.split())))


def available_currencies(extra: Iterable[str] = ()) -> List[str]:
    """
    Return the sorted list of selectable codes.

    Args:
        extra: Additional codes to include (e.g. configured defaults)

    Returns:
        Sorted, de-duplicated list of uppercase codes
    """
    codes = set(SUPPORTED_CURRENCIES)
    codes.update(c.upper() for c in extra if c)
    return sorted(codes)
