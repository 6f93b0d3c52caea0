"""Locale Lend backend: trust scoring and proximity ranking for neighborhood lending."""
