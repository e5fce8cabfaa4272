"""Application services: search index projection, fuzzy matching, result routing."""

from storefront_admin.application.services.fuzzy_matcher import BitapPattern, FuzzyMatcher
from storefront_admin.application.services.result_router import ResultRouter
from storefront_admin.application.services.search_index import build_search_index

__all__ = ["BitapPattern", "FuzzyMatcher", "ResultRouter", "build_search_index"]
