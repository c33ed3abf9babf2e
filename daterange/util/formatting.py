def ordinal_suffix(number: int) -> str:
    if 11 <= abs(number) % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(abs(number) % 10, "th")


def ordinalize(number: int) -> str:
    return f"{number}{ordinal_suffix(number)}"
