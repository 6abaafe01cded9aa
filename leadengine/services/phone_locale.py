from leadengine.core.constants import (
    CITY_CALL_WINDOWS,
    DEFAULT_CALL_WINDOW,
    PHONE_PREFIX_CITIES,
    PHONE_PREFIX_LENGTH,
    UNKNOWN_CITY,
)


def city_from_phone(phone: str) -> str:
    """Look up the city for a phone number's STD dialing prefix.

    Only the leading characters are inspected; no other normalisation is
    applied.  Unknown prefixes give ``"Other"``.
    """
    prefix = phone[:PHONE_PREFIX_LENGTH]
    return PHONE_PREFIX_CITIES.get(prefix, UNKNOWN_CITY)


def call_window_for(city: str) -> str:
    """Suggested outbound-call window for *city*."""
    return CITY_CALL_WINDOWS.get(city, DEFAULT_CALL_WINDOW)
