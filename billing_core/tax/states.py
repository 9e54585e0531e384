"""GST state codes (first two characters of a GSTIN)."""

# Seller's home state when the organization has not configured one (Maharashtra)
DEFAULT_SELLER_STATE_CODE = "27"

GST_STATE_CODES: dict[str, str] = {
    "01": "Jammu and Kashmir",
    "02": "Himachal Pradesh",
    "03": "Punjab",
    "04": "Chandigarh",
    "05": "Uttarakhand",
    "06": "Haryana",
    "07": "Delhi",
    "08": "Rajasthan",
    "09": "Uttar Pradesh",
    "10": "Bihar",
    "11": "Sikkim",
    "12": "Arunachal Pradesh",
    "13": "Nagaland",
    "14": "Manipur",
    "15": "Mizoram",
    "16": "Tripura",
    "17": "Meghalaya",
    "18": "Assam",
    "19": "West Bengal",
    "20": "Jharkhand",
    "21": "Odisha",
    "22": "Chhattisgarh",
    "23": "Madhya Pradesh",
    "24": "Gujarat",
    "26": "Dadra and Nagar Haveli and Daman and Diu",
    "27": "Maharashtra",
    "29": "Karnataka",
    "30": "Goa",
    "31": "Lakshadweep",
    "32": "Kerala",
    "33": "Tamil Nadu",
    "34": "Puducherry",
    "35": "Andaman and Nicobar Islands",
    "36": "Telangana",
    "37": "Andhra Pradesh",
    "38": "Ladakh",
    "97": "Other Territory",
}


def is_known_state_code(code: str) -> bool:
    """Return True if ``code`` is a GST state code."""
    return code in GST_STATE_CODES


def state_name(code: str) -> str:
    """Return the state name for a GST state code, or ``""`` if unknown."""
    return GST_STATE_CODES.get(code, "")


def format_place_of_supply(code: str) -> str:
    """Format a state code the way place of supply is stored.

    Parameters
    ----------
    code : str
        Two-digit GST state code.

    Returns
    -------
    str
        ``"27 - Maharashtra"`` for a known code, the bare code otherwise.
    """
    name = state_name(code)
    return f"{code} - {name}" if name else code
