"""Validation of IUCN Red List status arguments."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Sequence

from pydopa.errors import ValidationError
from pydopa.reference.iucn import VALID_STATUS_CODES

logger = logging.getLogger(__name__)


class InvalidStatusWarning(UserWarning):
    """Emitted for each status token that is not an IUCN status code."""


def validate_statuses(statuses: Sequence[str] | str) -> list[str]:
    """
    Filter status tokens down to valid IUCN Red List codes.

    Each invalid token produces an ``InvalidStatusWarning`` (repeated tokens
    and repeated calls warn every time) plus a log record, and is dropped.
    Matching is exact and case-sensitive against CR, EN, VU, NT, LC, EX, EW
    and DD.

    Args:
        statuses: A status code or a sequence of them.

    Returns:
        The valid codes in their original order, duplicates kept.

    Raises:
        ValidationError: If no valid code remains.
    """
    if isinstance(statuses, str):
        statuses = [statuses]

    valid = [s for s in statuses if s in VALID_STATUS_CODES]
    invalid = [s for s in statuses if s not in VALID_STATUS_CODES]

    # One warning per invalid token on every call, not once per call site.
    with warnings.catch_warnings():
        warnings.simplefilter("always", InvalidStatusWarning)
        for status in invalid:
            msg = f"{status!r} is not a valid IUCN status code"
            logger.warning(msg)
            warnings.warn(msg, InvalidStatusWarning, stacklevel=2)

    if not valid:
        if len(statuses) > 1:
            joined = ", ".join(repr(s) for s in statuses)
            msg = f"None of the provided codes are valid IUCN status codes: {joined}"
        else:
            offending = repr(statuses[0]) if statuses else "(none given)"
            msg = f"Provided code is not a valid IUCN status code: {offending}"
        raise ValidationError(msg)
    return valid
