def mask_nik(nik: str) -> str:
    # first 4 + **** + last 4, e.g. 1234567890123456 -> 1234****3456
    return f"{nik[:4]}****{nik[-4:]}"
