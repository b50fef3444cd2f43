from typing import List, Optional
from ..errors import ParseFailure

delimiter_pairs = {
    "(": ")",
}

def check_nesting_order(line: str) -> Optional[ParseFailure]:
    """
    Report the first closing delimiter without an opener, or the innermost
    opener still unclosed at end of input. Columns are 1-based.
    """
    stack: List[int] = []
    close_chars = set(delimiter_pairs.values())

    for pos, ch in enumerate(line):
        if ch in delimiter_pairs:
            stack.append(pos)
        elif ch in close_chars:
            if not stack:
                return ParseFailure(f"unbalanced '{ch}' with no matching opener", line, pos + 1)
            stack.pop()

    if stack:
        pos = stack[-1]
        closer = delimiter_pairs[line[pos]]
        return ParseFailure(f"unbalanced '{line[pos]}' is never closed", line, pos + 1, (f"'{closer}'",))
    return None
