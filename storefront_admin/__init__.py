"""Storefront admin API: global search and dashboard summary for the back office."""
