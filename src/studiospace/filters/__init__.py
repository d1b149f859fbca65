"""Listing classification and text extraction.

Pure functions with no I/O:
    - is_residential_listing / is_studio_suitable: accept/reject predicates
    - extract_price / extract_address: pattern-based extraction from page text
    - ClassificationPolicy: the keyword lists behind the predicates
"""

from .classifiers import is_residential_listing, is_studio_suitable
from .patterns import extract_address, extract_price
from .policy import DEFAULT_POLICY, ClassificationPolicy, load_policy

__all__ = [
    "ClassificationPolicy",
    "DEFAULT_POLICY",
    "extract_address",
    "extract_price",
    "is_residential_listing",
    "is_studio_suitable",
    "load_policy",
]
