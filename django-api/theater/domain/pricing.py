"""Per-performance charges and volume credits.

Amounts are integer cents.
"""

from theater.domain.models import Performance, Play
from theater.domain.value_objects import Genre

TRAGEDY_BASE_AMOUNT = 40000
TRAGEDY_AUDIENCE_THRESHOLD = 30
TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON = 1000

COMEDY_BASE_AMOUNT = 30000
COMEDY_AUDIENCE_THRESHOLD = 20
COMEDY_OVER_BASE_CAPACITY_AMOUNT = 10000
COMEDY_OVER_BASE_CAPACITY_PER_PERSON = 500
COMEDY_AMOUNT_PER_AUDIENCE = 300

BASE_VOLUME_CREDIT_THRESHOLD = 30
COMEDY_EXTRA_VOLUME_FACTOR = 5


def amount_for(performance: Performance, play: Play) -> int:
    """Return the charge for one performance.

    Raises:
        UnknownGenreError: If the play's genre has no pricing rule.
    """
    audience = performance.audience
    match Genre.from_string(play.genre):
        case Genre.TRAGEDY:
            result = TRAGEDY_BASE_AMOUNT
            if audience > TRAGEDY_AUDIENCE_THRESHOLD:
                result += TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON * (
                    audience - TRAGEDY_AUDIENCE_THRESHOLD
                )
        case Genre.COMEDY:
            result = COMEDY_BASE_AMOUNT
            if audience > COMEDY_AUDIENCE_THRESHOLD:
                result += COMEDY_OVER_BASE_CAPACITY_AMOUNT + (
                    COMEDY_OVER_BASE_CAPACITY_PER_PERSON * (audience - COMEDY_AUDIENCE_THRESHOLD)
                )
            result += COMEDY_AMOUNT_PER_AUDIENCE * audience
    return result


def volume_credits_for(performance: Performance, play: Play) -> int:
    """Return the loyalty credits earned by one performance."""
    result = max(performance.audience - BASE_VOLUME_CREDIT_THRESHOLD, 0)
    if Genre.lookup(play.genre) is Genre.COMEDY:
        result += performance.audience // COMEDY_EXTRA_VOLUME_FACTOR
    return result
