"""Title and URL predicates that gate which candidates become listings.

Commercial categories on classified sites also return residential units and
every kind of licensed business. Rather than enumerating what a photography
studio can be (any open commercial or industrial space), these predicates
enumerate what it cannot be.
"""

from typing import Optional

from .policy import DEFAULT_POLICY, ClassificationPolicy


def is_residential_listing(
    title: str,
    url: str = "",
    policy: Optional[ClassificationPolicy] = None,
) -> bool:
    """Return True if the listing looks residential rather than commercial.

    Args:
        title: Listing title
        url: Listing URL; checked for residential category paths
        policy: Keyword policy (defaults to the built-in lists)

    Returns:
        True if the listing should be rejected as residential
    """
    policy = policy or DEFAULT_POLICY
    lower_url = (url or "").lower()
    if any(path in lower_url for path in policy.residential_url_paths):
        return True

    lower = (title or "").lower()
    return any(keyword in lower for keyword in policy.residential_keywords)


def is_studio_suitable(
    title: str,
    policy: Optional[ClassificationPolicy] = None,
) -> bool:
    """Return True if the listing could plausibly host a photography studio.

    Rejects titles that are too short to mean anything, titles naming an
    unsuitable business type, and plain office listings. An office title is
    accepted when it also mentions a qualifier such as "studio" or
    "warehouse".

    Args:
        title: Listing title
        policy: Keyword policy (defaults to the built-in lists)

    Returns:
        True if the listing should be kept
    """
    policy = policy or DEFAULT_POLICY
    lower = (title or "").lower()

    if len(lower.strip()) < policy.min_title_length:
        return False

    if any(keyword in lower for keyword in policy.unsuitable_keywords):
        return False

    if "office" in lower and not any(q in lower for q in policy.office_qualifiers):
        return False

    return True
