"""Reading numeric samples from line-oriented text files."""

import logging
import math
from pathlib import Path
from typing import Iterable, List, Union

import numpy as np

from numcmp.core.errors import InvalidArgument, SampleReadError
from numcmp.core.sample import as_sorted_sample

logger = logging.getLogger(__name__)


def parse_numbers(lines: Iterable[str], source: str = "<input>") -> List[float]:
    """Parse one number per line; blank lines are skipped.

    Raises:
        SampleReadError: If a line is not a number or is NaN or infinite.
    """
    values: List[float] = []
    for lineno, line in enumerate(lines, start=1):
        text = line.strip()
        if not text:
            continue
        try:
            value = float(text)
        except ValueError:
            raise SampleReadError(
                f"{source}:{lineno}: cannot parse {text!r} as a number"
            ) from None
        if not math.isfinite(value):
            raise SampleReadError(f"{source}:{lineno}: non-finite value {text!r}")
        values.append(value)
    return values


def read_numbers(path: Union[str, Path]) -> List[float]:
    """Read one number per line, in file order.

    Blank lines are skipped and surrounding whitespace is ignored.

    Args:
        path: Text file to read.

    Returns:
        Values as floats, unsorted.

    Raises:
        SampleReadError: If the file cannot be opened, a line is not a
            number, a value is NaN or infinite, or the file is not UTF-8.
    """
    path = Path(path)

    try:
        f = open(path, encoding="utf-8")
    except OSError as e:
        raise SampleReadError(f"cannot read {path}: {e.strerror or e}") from e

    with f:
        try:
            values = parse_numbers(f, source=str(path))
        except UnicodeDecodeError as e:
            raise SampleReadError(f"{path} is not valid UTF-8 text: {e.reason}") from e

    logger.debug(f"Read {len(values)} values from {path}")
    return values


def read_sorted_sample(path: Union[str, Path]) -> np.ndarray:
    """Read a file and return its values as a sorted float64 array.

    Raises:
        SampleReadError: See read_numbers.
        InvalidArgument: If the file holds no numbers.
    """
    values = read_numbers(path)
    if not values:
        raise InvalidArgument(f"{path} contains no numbers")
    return as_sorted_sample(values)
