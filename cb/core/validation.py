from dataclasses import dataclass
from cb.common.logger import log
from cb.core.responsive import parse_number

RANGE_MESSAGE = "End Number should be bigger then the Start number"


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    message: str = ""

    def __bool__(self):
        return self.ok


# Checks that the counter actually counts up. Values are parsed the same way the rendered block parses them, so "9"
# and "10" compare as numbers; anything without a number is invalid. Only reports, it never stops rendering; showing
# the message to the operator is up to the caller.
def validate_counter_range(config) -> ValidationResult:
    start, end = config.get("start"), config.get("end")
    start_num, end_num = parse_number(start), parse_number(end)
    if start_num is None or end_num is None or not start_num < end_num:
        log.warning(f"Counter range is invalid for '{config.get('clientId')}': start={start!r}, end={end!r}")
        return ValidationResult(False, RANGE_MESSAGE)
    return ValidationResult(True)
