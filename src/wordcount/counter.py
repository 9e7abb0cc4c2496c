"""Token frequency counting."""

import re
from collections import Counter

from .options import DEFAULT_COUNT_OPTION, CountOption
from .source import LineSource, iter_lines

WORD_PATTERN = re.compile(r"\w+")

FrequencyTable = Counter[str]


def count(source: LineSource, option: CountOption = DEFAULT_COUNT_OPTION) -> FrequencyTable:
    """Read UTF-8 text line by line from ``source`` and count token frequency.

    The token depends on ``option``:

    * ``CountOption.CHAR``: each Unicode character. Line terminators are not counted.
    * ``CountOption.WORD``: each maximal run matching ``\\w+``.
    * ``CountOption.LINE``: each line separated by ``\\n`` or ``\\r\\n``.

    Example:
        >>> freq = count("aa bb cc bb", CountOption.WORD)
        >>> freq["bb"]
        2

    Args:
        source: Text or bytes, a file object, or an iterable of lines.
        option: Counting mode. Defaults to words.

    Returns:
        Counter mapping each token to its number of occurrences.

    Raises:
        InvalidEncodingError: If the input is not valid UTF-8. No partial
            table is returned.
    """
    option = CountOption.parse(option)
    freqs: FrequencyTable = Counter()

    for line in iter_lines(source):
        if option is CountOption.CHAR:
            freqs.update(line)
        elif option is CountOption.WORD:
            freqs.update(m.group() for m in WORD_PATTERN.finditer(line))
        else:
            freqs[line] += 1

    return freqs
