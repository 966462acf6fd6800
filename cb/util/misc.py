from datetime import datetime



# Simply returns the current local time as an ISO8601 string with timezone offset.
def now_iso():
    return datetime.now().astimezone().isoformat()


# Formats a number the way a browser would print it into a string: integral floats lose their ".0", everything else
# is left to repr. Non-numbers pass through str() untouched.
def format_number(value):
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# Zero-pads counts below 10 to two characters, matching what the front-end counter shows ("07", but also "0-3").
def pad_count(count):
    if count < 10:
        return f"0{count}"
    return str(count)
